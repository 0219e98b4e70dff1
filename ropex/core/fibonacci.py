from __future__ import annotations

from typing import List, Tuple


def _fib_pair(n: int) -> Tuple[int, int]:
    # Fast doubling: returns (Fib(n), Fib(n + 1)).
    a, b = 0, 1
    for bit in bin(n)[2:]:
        c = a * (2 * b - a)
        d = a * a + b * b
        if bit == "1":
            a, b = d, c + d
        else:
            a, b = c, d
    return a, b


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number with ``fib(0) == 0`` and ``fib(1) == 1``."""

    if n < 0:
        raise ValueError(f"Fibonacci index must be non-negative, got {n}.")
    return _fib_pair(n)[0]


def fibonacci_bounds(length: int) -> List[int]:
    """Return ``[fib(2), fib(3), ...]`` up to the first value exceeding ``length``.

    Consecutive entries delimit the packing slots used by rebalancing: slot
    ``i`` holds subtrees whose length lies in ``[bounds[i], bounds[i + 1])``.

    >>> fibonacci_bounds(0)
    []
    >>> fibonacci_bounds(8)
    [1, 2, 3, 5, 8, 13]
    """

    if length <= 0:
        return []
    bounds: List[int] = []
    a, b = 1, 2
    while a <= length:
        bounds.append(a)
        a, b = b, a + b
    bounds.append(a)
    return bounds


__all__ = ["fib", "fibonacci_bounds"]

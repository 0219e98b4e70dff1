from __future__ import annotations

from typing import List, Optional

from ropex.core.fibonacci import fib, fibonacci_bounds
from ropex.core.node import Internal, Leaf, Node, concat
from ropex.diagnostics import log_operation
from ropex.logging import get_logger

LOGGER = get_logger("algo.balance")


def is_balanced(root: Optional[Node]) -> bool:
    """A tree of depth ``d`` is balanced when its length is at least ``fib(d + 2)``."""

    if root is None:
        return True
    return root.length() >= fib(root.depth() + 2)


def _pack(leaves: List[Leaf], bounds: List[int]) -> Optional[Node]:
    # Slot i holds a subtree whose length lies in [bounds[i], bounds[i + 1]).
    # Occupied slots, read from the highest index down, hold consecutive runs
    # of the sequence in left-to-right order.
    slots: List[Optional[Node]] = [None] * max(len(bounds) - 1, 0)
    for leaf in leaves:
        if leaf.weight == 0:
            continue
        acc: Node = Leaf(leaf.fragment)
        length = acc.weight
        i = 0
        while True:
            occupant = slots[i]
            if occupant is not None:
                acc = Internal(occupant, acc)
                length = acc.length()
                slots[i] = None
            elif length < bounds[i + 1]:
                slots[i] = acc
                break
            else:
                i += 1

    result: Optional[Node] = None
    for occupant in slots:
        if occupant is not None:
            result = concat(occupant, result)
    return result


def rebalance(root: Optional[Node]) -> Optional[Node]:
    """Rebuild ``root`` by Fibonacci-bucket packing of its leaves.

    The returned tree represents the same sequence; ``None`` is returned when
    every leaf is empty. The input tree is left untouched and may be dropped
    by the caller.
    """

    if root is None:
        return None
    with log_operation(LOGGER, "rope_balance") as op_log:
        total = root.length()
        leaves = root.collect_leaves([])
        depth_before = root.depth()
        balanced = _pack(leaves, fibonacci_bounds(total))
        op_log.add_metadata(
            leaves=len(leaves),
            length=total,
            depth_before=depth_before,
            depth_after=0 if balanced is None else balanced.depth(),
        )
    return balanced


__all__ = ["is_balanced", "rebalance"]

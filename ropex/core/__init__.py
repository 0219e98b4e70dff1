"""Core data structures for ropex: fragment kinds, Fibonacci helpers and tree nodes."""

from .fibonacci import fib, fibonacci_bounds
from .fragments import (
    FragmentKind,
    FragmentRegistry,
    available_fragment_kinds,
    fragment_kind_for,
    get_fragment_kind,
    register_fragment_kind,
)
from .node import Internal, Leaf, Node, clone, concat, iter_fragments, split

__all__ = [
    "FragmentKind",
    "FragmentRegistry",
    "Internal",
    "Leaf",
    "Node",
    "available_fragment_kinds",
    "clone",
    "concat",
    "fib",
    "fibonacci_bounds",
    "fragment_kind_for",
    "get_fragment_kind",
    "iter_fragments",
    "register_fragment_kind",
    "split",
]

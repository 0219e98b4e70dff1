"""Binary-tree nodes backing a :class:`ropex.Rope`.

A node is either a :class:`Leaf`, holding a contiguous fragment of the
represented sequence, or an :class:`Internal` node owning two children and
caching the length of its left subtree as ``weight``::

          Internal(w=4)
          /          \\
    Leaf("some")   Leaf("text")

Nodes are owned by exactly one parent (or by the rope). :func:`split` and
:func:`concat` consume their inputs; callers must not touch a node after
passing it to either of them.

Walks are written as loops over an explicit stack rather than recursion so a
long unbalanced spine (for example after many appends) cannot exhaust the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from ropex.core.fragments import Fragment, FragmentKind
from ropex.errors import IndexOutOfRange


class Node:
    __slots__ = ("weight",)

    weight: int

    def length(self) -> int:
        """Length of the sequence represented by this subtree."""

        total = 0
        node: Node = self
        while isinstance(node, Internal):
            total += node.weight
            node = node.right
        return total + node.weight

    def get_item(self, index: int) -> object:
        node: Node = self
        while isinstance(node, Internal):
            if index < node.weight:
                node = node.left
            else:
                index -= node.weight
                node = node.right
        if index < 0 or index >= node.weight:
            raise IndexOutOfRange.for_index(index, node.weight)
        return node.fragment[index]

    def substring(self, start: int, count: int, kind: FragmentKind) -> Fragment:
        """Return ``count`` elements starting at ``start`` as one fragment."""

        pieces: List[Fragment] = []
        stack: List[Tuple[Node, int, int]] = [(self, start, count)]
        while stack:
            node, offset, remaining = stack.pop()
            if remaining <= 0:
                continue
            if isinstance(node, Leaf):
                pieces.append(node.fragment[offset:offset + remaining])
                continue
            weight = node.weight
            if offset < weight:
                from_left = min(remaining, weight - offset)
                # Right part first so the left part is popped first.
                if offset + remaining > weight:
                    stack.append((node.right, 0, remaining - from_left))
                stack.append((node.left, offset, from_left))
            else:
                stack.append((node.right, offset - weight, remaining))
        return kind.join(pieces)

    def depth(self) -> int:
        deepest = 0
        stack: List[Tuple[Node, int]] = [(self, 0)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, Internal):
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
            elif level > deepest:
                deepest = level
        return deepest

    def collect_leaves(self, out: List["Leaf"]) -> List["Leaf"]:
        """Append every leaf of this subtree to ``out`` in left-to-right order."""

        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Internal):
                stack.append(node.right)
                stack.append(node.left)
            else:
                out.append(node)
        return out


class Leaf(Node):
    __slots__ = ("fragment",)

    def __init__(self, fragment: Fragment) -> None:
        self.fragment = fragment
        self.weight = len(fragment)

    def __repr__(self) -> str:
        return f"Leaf({self.fragment!r})"


class Internal(Node):
    __slots__ = ("left", "right")

    def __init__(self, left: Node, right: Node) -> None:
        self.left = left
        self.right = right
        self.weight = left.length()

    def __repr__(self) -> str:
        return f"Internal(weight={self.weight}, left={self.left!r}, right={self.right!r})"


def concat(left: Optional[Node], right: Optional[Node]) -> Optional[Node]:
    """Join two trees under a new internal node, consuming both.

    An absent side yields the other side unchanged so that no internal node is
    ever built with a single child.
    """

    if left is None:
        return right
    if right is None:
        return left
    return Internal(left, right)


def split(node: Optional[Node], index: int) -> Tuple[Optional[Node], Optional[Node]]:
    """Partition ``node`` into the first ``index`` elements and the rest.

    Consumes ``node``: internal nodes on the path to the split point are either
    reused as the left part (split point in their right subtree) or discarded
    (split point in, or on the boundary of, their left subtree). The lengths
    of the two results always add up to the length of the input.
    """

    if node is None:
        if index != 0:
            raise IndexOutOfRange.for_index(index, 0)
        return None, None

    # Each frame records an internal node on the descent path, which side the
    # split point lies in, and (for left descents) the right child to re-join.
    path: List[Tuple[Internal, bool, Optional[Node]]] = []
    current: Node = node
    while isinstance(current, Internal):
        weight = current.weight
        if index < weight:
            path.append((current, True, current.right))
            current = current.left
        elif index > weight:
            path.append((current, False, None))
            index -= weight
            current = current.right
        else:
            break

    left_part: Optional[Node]
    right_part: Optional[Node]
    if isinstance(current, Internal):
        left_part, right_part = current.left, current.right
    else:
        if index < 0 or index > current.weight:
            raise IndexOutOfRange.for_index(index, current.weight)
        fragment = current.fragment
        left_part = Leaf(fragment[:index])
        right_part = Leaf(fragment[index:])

    for parent, went_left, old_right in reversed(path):
        if went_left:
            right_part = concat(right_part, old_right)
        else:
            parent.right = left_part
            left_part = parent
    return left_part, right_part


def clone(node: Optional[Node], kind: FragmentKind) -> Optional[Node]:
    """Return a structurally independent deep copy of ``node``."""

    if node is None:
        return None
    built: List[Node] = []
    stack: List[Tuple[Node, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, Leaf):
            built.append(Leaf(kind.copy(current.fragment)))
        elif expanded:
            right = built.pop()
            left = built.pop()
            built.append(Internal(left, right))
        else:
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
    return built[0]


def iter_fragments(node: Optional[Node]) -> Iterator[Fragment]:
    """Yield the fragments of every leaf under ``node`` in order."""

    if node is None:
        return
    for leaf in node.collect_leaves([]):
        yield leaf.fragment


__all__ = [
    "Internal",
    "Leaf",
    "Node",
    "clone",
    "concat",
    "iter_fragments",
    "split",
]

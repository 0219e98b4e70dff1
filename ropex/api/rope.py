from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple

from ropex.algo.balance import is_balanced, rebalance
from ropex.core.fragments import Fragment, FragmentKind, fragment_kind_for, get_fragment_kind
from ropex.core.node import Internal, Leaf, Node, clone, concat, iter_fragments, split
from ropex.errors import IndexOutOfRange


class Rope:
    """Mutable handle over a binary tree of sequence fragments.

    A rope owns its tree exclusively: every value inserted or appended is deep
    copied, and copies of a rope never share nodes with the original.

    >>> rope = Rope("some")
    >>> rope.append("text")
    >>> rope.to_sequence()
    'sometext'
    >>> rope.insert(4, "!!")
    >>> str(rope)
    'some!!text'
    """

    __slots__ = ("_root", "_kind")

    def __init__(self, value: Any = None, *, kind: str | None = None) -> None:
        if isinstance(value, Rope):
            self._kind = value._kind
            self._root = clone(value._root, value._kind)
        elif value is None:
            self._kind = get_fragment_kind(kind)
            self._root = None
        else:
            self._kind = get_fragment_kind(kind) if kind is not None else fragment_kind_for(value)
            self._root = Leaf(self._kind.coerce(value))

    @classmethod
    def _from_root(cls, root: Optional[Node], kind: FragmentKind) -> "Rope":
        rope = cls.__new__(cls)
        rope._root = root
        rope._kind = kind
        return rope

    def copy(self) -> "Rope":
        return Rope(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "Rope":
        return Rope(self)

    def _operand_root(self, value: Any) -> Optional[Node]:
        """Return an owned tree for ``value``, adopting its kind if this rope is empty."""

        kind = value._kind if isinstance(value, Rope) else fragment_kind_for(value)
        if kind is not self._kind and self._root is not None:
            raise TypeError(
                f"Cannot combine a '{self._kind.name}' rope with a '{kind.name}' value."
            )
        if isinstance(value, Rope):
            operand = clone(value._root, kind)
        else:
            operand = Leaf(kind.coerce(value))
        self._kind = kind
        return operand

    @property
    def kind(self) -> str:
        return self._kind.name

    def length(self) -> int:
        if self._root is None:
            return 0
        return self._root.length()

    def __len__(self) -> int:
        return self.length()

    def __bool__(self) -> bool:
        return self.length() > 0

    def at(self, index: int) -> Any:
        length = self.length()
        if self._root is None or index < 0 or index >= length:
            raise IndexOutOfRange.for_index(index, length)
        return self._root.get_item(index)

    def _empty(self) -> Fragment:
        # Slicing a leaf keeps per-value details such as an ndarray dtype.
        node = self._root
        if node is None:
            return self._kind.empty()
        while isinstance(node, Internal):
            node = node.left
        return node.fragment[:0]

    def _check_range(self, start: int, count: int) -> None:
        length = self.length()
        if start < 0 or count < 0 or start > length or start + count > length:
            raise IndexOutOfRange.for_range(start, count, length)

    def substring(self, start: int, count: int) -> Fragment:
        self._check_range(start, count)
        if self._root is None or count == 0:
            return self._empty()
        return self._root.substring(start, count, self._kind)

    def __getitem__(self, key: int | slice) -> Any:
        length = self.length()
        if isinstance(key, slice):
            start, stop, step = key.indices(length)
            if step != 1:
                raise ValueError("Rope slices do not support a step other than 1.")
            return self.substring(start, max(stop - start, 0))
        index = key + length if key < 0 else key
        if index < 0 or index >= length:
            raise IndexOutOfRange.for_index(key, length)
        return self.at(index)

    def __iter__(self) -> Iterator[Any]:
        for fragment in iter_fragments(self._root):
            yield from fragment

    def fragments(self) -> Iterator[Fragment]:
        """Iterate over the leaf fragments in order."""

        return iter_fragments(self._root)

    def to_sequence(self) -> Fragment:
        return self._kind.join(list(iter_fragments(self._root)))

    def depth(self) -> int:
        if self._root is None:
            return 0
        return self._root.depth()

    def is_balanced(self) -> bool:
        return is_balanced(self._root)

    def insert(self, index: int, value: Any) -> None:
        length = self.length()
        if index < 0 or index > length:
            raise IndexOutOfRange.for_index(index, length)
        inserted = self._operand_root(value)
        left, right = split(self._root, index)
        self._root = concat(concat(left, inserted), right)

    def append(self, value: Any) -> None:
        inserted = self._operand_root(value)
        self._root = concat(self._root, inserted)

    def erase(self, start: int, count: int) -> None:
        self._check_range(start, count)
        left, rest = split(self._root, start)
        _, right = split(rest, count)
        self._root = concat(left, right)

    def balance(self) -> None:
        if is_balanced(self._root):
            return
        self._root = rebalance(self._root)

    def split(self, index: int) -> Tuple["Rope", "Rope"]:
        """Return ``(head, tail)`` ropes; this rope is left unchanged."""

        length = self.length()
        if index < 0 or index > length:
            raise IndexOutOfRange.for_index(index, length)
        left, right = split(clone(self._root, self._kind), index)
        return Rope._from_root(left, self._kind), Rope._from_root(right, self._kind)

    def __add__(self, other: Any) -> "Rope":
        result = Rope(self)
        result.append(other)
        return result

    def __iadd__(self, other: Any) -> "Rope":
        self.append(other)
        return self

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rope):
            if other._kind is not self._kind:
                return False
            return self._kind.equal(self.to_sequence(), other.to_sequence())
        if self._kind.matches(other):
            return self._kind.equal(self.to_sequence(), self._kind.coerce(other))
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.to_sequence())

    def __repr__(self) -> str:
        return f"Rope({self.to_sequence()!r})"


__all__ = ["Rope"]

from __future__ import annotations


class RopeError(Exception):
    """Base class for errors raised by ropex."""


class IndexOutOfRange(RopeError, IndexError):
    """An index or range argument falls outside the represented sequence."""

    def __init__(self, message: str, *, index: int | None = None, length: int | None = None) -> None:
        super().__init__(message)
        self.index = index
        self.length = length

    @classmethod
    def for_index(cls, index: int, length: int) -> "IndexOutOfRange":
        return cls(
            f"Index {index} out of range for rope of length {length}.",
            index=index,
            length=length,
        )

    @classmethod
    def for_range(cls, start: int, count: int, length: int) -> "IndexOutOfRange":
        return cls(
            f"Range [{start}, {start + count}) out of range for rope of length {length}.",
            index=start,
            length=length,
        )


__all__ = ["RopeError", "IndexOutOfRange"]

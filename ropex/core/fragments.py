from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Sequence, Tuple

import numpy as np

from ropex import config as rx_config

Fragment = Any


@dataclass(frozen=True)
class FragmentKind:
    """How a rope stores, joins and compares one kind of element sequence."""

    name: str
    types: Tuple[type, ...]
    coerce: Callable[[Any], Fragment]
    join: Callable[[Sequence[Fragment]], Fragment]
    equal: Callable[[Fragment, Fragment], bool]
    copy: Callable[[Fragment], Fragment]

    def matches(self, value: Any) -> bool:
        return isinstance(value, self.types)

    def empty(self) -> Fragment:
        return self.join(())

    def concat(self, lhs: Fragment, rhs: Fragment) -> Fragment:
        return self.join((lhs, rhs))


class FragmentRegistry:
    """Minimal registry of the sequence kinds a rope may hold."""

    def __init__(self) -> None:
        self._kinds: Dict[str, FragmentKind] = {}

    def register(self, kind: FragmentKind, *, overwrite: bool = False) -> None:
        name = kind.name.lower()
        if not overwrite and name in self._kinds:
            raise ValueError(f"Fragment kind '{kind.name}' already registered.")
        self._kinds[name] = kind

    def get(self, name: str) -> FragmentKind:
        key = name.lower()
        if key not in self._kinds:
            raise KeyError(f"Fragment kind '{name}' not registered.")
        return self._kinds[key]

    def lookup(self, value: Any) -> FragmentKind:
        for kind in self._kinds.values():
            if kind.matches(value):
                return kind
        raise TypeError(
            f"Unsupported fragment type '{type(value).__name__}'. "
            f"Expected one of {self.names()}."
        )

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._kinds.keys()))


def _identity(value: Fragment) -> Fragment:
    return value


def _equal(lhs: Fragment, rhs: Fragment) -> bool:
    return lhs == rhs


def _join_str(parts: Iterable[str]) -> str:
    return "".join(parts)


def _join_bytes(parts: Iterable[bytes]) -> bytes:
    return b"".join(parts)


def _join_list(parts: Iterable[list]) -> list:
    joined: list = []
    for part in parts:
        joined.extend(part)
    return joined


def _join_tuple(parts: Iterable[tuple]) -> tuple:
    return tuple(item for part in parts for item in part)


def _coerce_ndarray(value: Any) -> np.ndarray:
    arr = np.array(value, copy=True)
    if arr.ndim != 1:
        raise ValueError(f"ndarray fragments must be one-dimensional, got ndim={arr.ndim}.")
    return arr


def _join_ndarray(parts: Sequence[np.ndarray]) -> np.ndarray:
    parts = list(parts)
    if not parts:
        return np.empty(0)
    return np.concatenate(parts, axis=0)


def _equal_ndarray(lhs: np.ndarray, rhs: np.ndarray) -> bool:
    return bool(np.array_equal(lhs, rhs))


def _load_builtin_registry() -> FragmentRegistry:
    registry = FragmentRegistry()
    registry.register(
        FragmentKind(
            name="str",
            types=(str,),
            coerce=str,
            join=_join_str,
            equal=_equal,
            copy=_identity,
        )
    )
    registry.register(
        FragmentKind(
            name="bytes",
            types=(bytes, bytearray, memoryview),
            coerce=bytes,
            join=_join_bytes,
            equal=_equal,
            copy=_identity,
        )
    )
    registry.register(
        FragmentKind(
            name="list",
            types=(list,),
            coerce=list,
            join=_join_list,
            equal=_equal,
            copy=list,
        )
    )
    registry.register(
        FragmentKind(
            name="tuple",
            types=(tuple,),
            coerce=tuple,
            join=_join_tuple,
            equal=_equal,
            copy=_identity,
        )
    )
    registry.register(
        FragmentKind(
            name="ndarray",
            types=(np.ndarray,),
            coerce=_coerce_ndarray,
            join=_join_ndarray,
            equal=_equal_ndarray,
            copy=np.copy,
        )
    )
    return registry


_REGISTRY = _load_builtin_registry()


def get_fragment_kind(name: str | None = None) -> FragmentKind:
    """Return a registered kind, defaulting to the runtime-selected kind."""

    if name is None:
        name = rx_config.runtime_config().default_kind
    return _REGISTRY.get(name)


def fragment_kind_for(value: Any) -> FragmentKind:
    """Return the registered kind able to hold ``value``."""

    return _REGISTRY.lookup(value)


def register_fragment_kind(kind: FragmentKind, *, overwrite: bool = False) -> None:
    _REGISTRY.register(kind, overwrite=overwrite)


def available_fragment_kinds() -> Tuple[str, ...]:
    return _REGISTRY.names()


__all__ = [
    "Fragment",
    "FragmentKind",
    "FragmentRegistry",
    "available_fragment_kinds",
    "fragment_kind_for",
    "get_fragment_kind",
    "register_fragment_kind",
]

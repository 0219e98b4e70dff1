"""ropex: a binary-tree rope for editing very long sequences.

Quick Start
-----------
>>> from ropex import Rope
>>>
>>> rope = Rope("some")
>>> rope.append("text")
>>> rope.substring(2, 4)
'mete'
>>> rope.insert(4, "!!")
>>> rope.erase(4, 2)
>>> rope.to_sequence()
'sometext'

Other sequence kinds
--------------------
>>> import numpy as np
>>> samples = Rope(np.arange(4))
>>> samples.append(np.arange(4, 8))
>>> samples.to_sequence()
array([0, 1, 2, 3, 4, 5, 6, 7])

Classes
-------
Rope : Public rope handle.
IndexOutOfRange : Raised for indices or ranges outside the rope.
"""

from importlib.metadata import version as _pkg_version

try:
    __version__ = _pkg_version("ropex")
except Exception:  # pragma: no cover - best effort during local development
    __version__ = "0.0.1"

from .api import Rope
from .algo import is_balanced, rebalance
from .config import describe_runtime, reset_runtime_config_cache, runtime_config
from .core import (
    FragmentKind,
    available_fragment_kinds,
    fib,
    get_fragment_kind,
    register_fragment_kind,
)
from .errors import IndexOutOfRange, RopeError

__all__ = [
    "__version__",
    "Rope",
    "IndexOutOfRange",
    "RopeError",
    "FragmentKind",
    "available_fragment_kinds",
    "describe_runtime",
    "fib",
    "get_fragment_kind",
    "is_balanced",
    "rebalance",
    "register_fragment_kind",
    "reset_runtime_config_cache",
    "runtime_config",
]

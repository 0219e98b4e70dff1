#!/usr/bin/env python
"""Quick-start guide for ropex library usage.

Run with: python -m ropex

This module intentionally avoids importing ropex internals to provide
a fast, clean startup for displaying help text.
"""

from __future__ import annotations

QUICKSTART = """\
================================================================================
                                   ROPEX
        Binary-tree rope for editing very long strings and sequences
================================================================================

INSTALLATION
------------
    pip install ropex

BASIC USAGE
-----------
    from ropex import Rope

    rope = Rope("some")
    rope.append("text")          # "sometext"
    rope.insert(4, "!!")         # "some!!text"
    rope.erase(4, 2)             # "sometext"
    rope.substring(2, 4)         # "mete"
    rope.at(0)                   # "s"
    rope[1:3]                    # "om"

    head, tail = rope.split(4)   # two new ropes, rope itself unchanged
    other = rope.copy()          # deep copy, no shared nodes

BALANCING
---------
Repeated edits deepen the tree. A rope of depth d is balanced when its
length is at least Fib(d + 2); balance() rebuilds it otherwise:

    for _ in range(1000):
        rope.append("x")
    rope.is_balanced()           # False
    rope.balance()
    rope.is_balanced()           # True

OTHER SEQUENCE KINDS
--------------------
    Rope(b"bytes"), Rope([1, 2, 3]), Rope((1, 2)), Rope(numpy.arange(8))
    Rope(kind="list")            # empty rope holding lists

CONFIGURATION
-------------
    ROPEX_LOG_LEVEL              logging level for the "ropex" logger (INFO)
    ROPEX_ENABLE_DIAGNOSTICS     CPU/RSS figures in operation logs (1)
    ROPEX_DEFAULT_KIND           kind of an empty Rope() (str)

BENCHMARKING CLI
----------------
For edit-throughput measurements (separate from library usage):

    python -m cli.ropes --length 100000 --edits 2000 --balance-every 250

================================================================================
"""


def main() -> None:
    """Print quick-start guide."""
    print(QUICKSTART)


if __name__ == "__main__":
    main()

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Sequence

from numpy.random import default_rng

from ropex import Rope
from tests.utils.workloads import EditOp, edit_script, random_payload


@dataclass(frozen=True)
class EditBenchmarkResult:
    kind: str
    initial_length: int
    edits: int
    elapsed_seconds: float
    edits_per_second: float
    balance_passes: int
    final_length: int
    final_depth: int
    balanced: bool


def replay_edits(rope: Rope, script: Sequence[EditOp], *, balance_every: int = 0) -> int:
    """Apply ``script`` to ``rope`` and return the number of balance passes run."""

    passes = 0
    for step, edit in enumerate(script, start=1):
        if edit.op == "insert":
            rope.insert(edit.index, edit.payload)
        elif edit.op == "erase":
            rope.erase(edit.index, edit.count)
        elif edit.op == "at":
            rope.at(edit.index)
        else:
            raise ValueError(f"Unknown edit operation '{edit.op}'.")
        if balance_every > 0 and step % balance_every == 0 and not rope.is_balanced():
            rope.balance()
            passes += 1
    return passes


def benchmark_edits(
    *,
    length: int,
    edits: int,
    seed: int = 0,
    kind: str = "str",
    balance_every: int = 0,
    max_chunk: int = 16,
) -> EditBenchmarkResult:
    rng = default_rng(seed)
    rope = Rope(random_payload(rng, kind, length))
    script = edit_script(
        rng,
        initial_length=length,
        edits=edits,
        kind=kind,
        max_chunk=max_chunk,
    )

    start = time.perf_counter()
    passes = replay_edits(rope, script, balance_every=balance_every)
    elapsed = time.perf_counter() - start

    return EditBenchmarkResult(
        kind=kind,
        initial_length=length,
        edits=len(script),
        elapsed_seconds=elapsed,
        edits_per_second=len(script) / elapsed if elapsed > 0 else float("inf"),
        balance_passes=passes,
        final_length=rope.length(),
        final_depth=rope.depth(),
        balanced=rope.is_balanced(),
    )

from __future__ import annotations

from .app import EditCLIOptions, main, run_edits
from .benchmark import EditBenchmarkResult, benchmark_edits, replay_edits

__all__ = [
    "EditBenchmarkResult",
    "EditCLIOptions",
    "benchmark_edits",
    "main",
    "replay_edits",
    "run_edits",
]

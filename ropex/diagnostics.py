"""Operation-level resource logging.

Each instrumented operation emits a single INFO record of the form::

    op=rope_balance wall_ms=0.412 cpu_user_ms=0.398 rss_delta=0B leaves=12 ...

CPU and RSS figures come from ``psutil`` and are reported as ``NA`` when
diagnostics are disabled via ``ROPEX_ENABLE_DIAGNOSTICS=0``.
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

import psutil

from ropex import config as rx_config


@dataclass(frozen=True)
class _ResourceSnapshot:
    cpu_user_seconds: float
    rss_bytes: int


def _resource_snapshot(process: psutil.Process) -> _ResourceSnapshot:
    cpu = process.cpu_times()
    memory = process.memory_info()
    return _ResourceSnapshot(cpu_user_seconds=float(cpu.user), rss_bytes=int(memory.rss))


def _format_bytes(value: int) -> str:
    magnitude = abs(value)
    if magnitude < 1024:
        return f"{value}B"
    if magnitude < 1024 * 1024:
        return f"{value / 1024:.1f}KiB"
    return f"{value / (1024 * 1024):.1f}MiB"


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


@dataclass
class OperationLog:
    """Mutable record handed to the body of a :func:`log_operation` block."""

    op: str
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, **values: Any) -> None:
        self.metadata.update(values)

    def render(
        self,
        *,
        wall_ms: float,
        cpu_user_ms: float | None,
        rss_delta: int | None,
    ) -> str:
        parts = [
            f"op={self.op}",
            f"wall_ms={wall_ms:.3f}",
            "cpu_user_ms=NA" if cpu_user_ms is None else f"cpu_user_ms={cpu_user_ms:.3f}",
            "rss_delta=NA" if rss_delta is None else f"rss_delta={_format_bytes(rss_delta)}",
        ]
        parts.extend(f"{key}={_format_value(value)}" for key, value in self.metadata.items())
        return " ".join(parts)


@contextmanager
def log_operation(logger: logging.Logger, op: str) -> Iterator[OperationLog]:
    """Time the enclosed block and log one summary line when it completes."""

    enabled = rx_config.runtime_config().enable_diagnostics
    process = psutil.Process() if enabled else None
    before = _resource_snapshot(process) if process is not None else None
    start = time.perf_counter()
    record = OperationLog(op=op)

    yield record

    wall_ms = (time.perf_counter() - start) * 1e3
    cpu_user_ms: float | None = None
    rss_delta: int | None = None
    if process is not None and before is not None:
        after = _resource_snapshot(process)
        cpu_user_ms = (after.cpu_user_seconds - before.cpu_user_seconds) * 1e3
        rss_delta = after.rss_bytes - before.rss_bytes
    logger.info(record.render(wall_ms=wall_ms, cpu_user_ms=cpu_user_ms, rss_delta=rss_delta))


__all__ = ["OperationLog", "log_operation"]

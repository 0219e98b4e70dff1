from __future__ import annotations

import logging

_ROOT = "ropex"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger namespaced under the ``ropex`` hierarchy."""

    if not name:
        return logging.getLogger(_ROOT)
    return logging.getLogger(f"{_ROOT}.{name}")


__all__ = ["get_logger"]

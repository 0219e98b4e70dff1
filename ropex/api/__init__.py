"""Public ergonomic façade for ropex."""

from .rope import Rope

__all__ = ["Rope"]

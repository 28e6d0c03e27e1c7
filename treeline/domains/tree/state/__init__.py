"""Per-session tree state."""

from .expansion import TreeState

__all__ = ["TreeState"]

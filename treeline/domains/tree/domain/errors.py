"""Custom exceptions for the tree formatter."""

from __future__ import annotations

from typing import Any


class TreelineError(Exception):
    """Base class for treeline errors."""


class MalformedTreeError(TreelineError, ValueError):
    """Exception raised when input data does not form a finite, acyclic tree."""

    def __init__(self, reason: str, *, node_id: Any = None):
        self.reason = reason
        self.node_id = node_id
        if node_id is None:
            super().__init__(f"Malformed tree: {reason}")
        else:
            super().__init__(f"Malformed tree at node {node_id!r}: {reason}")

"""Expansion state for a single rendering session."""

from __future__ import annotations

import logging
from typing import Hashable

logger = logging.getLogger(__name__)


class TreeState:
    """Mapping from node id to an "expanded" flag.

    Entries are created lazily, seeded from ``default_expanded``. Each node's
    flag is independent: collapsing a parent leaves descendant entries intact,
    traversal simply stops reaching them.
    """

    def __init__(self, default_expanded: bool = False) -> None:
        self._default_expanded = default_expanded
        self._expanded: dict[Hashable, bool] = {}

    @property
    def default_expanded(self) -> bool:
        return self._default_expanded

    def is_expanded(self, node_id: Hashable) -> bool:
        return self._expanded.get(node_id, self._default_expanded)

    def toggle(self, node_id: Hashable) -> bool:
        """Flip the flag for ``node_id`` and return the new value.

        Unknown ids behave as newly seen nodes: the entry starts at the
        default and is then flipped.
        """
        expanded = not self.is_expanded(node_id)
        self._expanded[node_id] = expanded
        logger.debug("toggled node %r -> %s", node_id, "expanded" if expanded else "collapsed")
        return expanded

    def snapshot(self) -> dict[Hashable, bool]:
        """Copy of the recorded entries (nodes never toggled are absent)."""
        return dict(self._expanded)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._expanded

    def __len__(self) -> int:
        return len(self._expanded)

    def __repr__(self) -> str:
        return f"TreeState(default_expanded={self._default_expanded!r}, entries={len(self._expanded)})"

"""Render instruction model emitted by the traversal engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .nodes import NodeId, TreeNode


@dataclass(frozen=True)
class RenderInstruction:
    """One visited node, described for the host to draw.

    ``truncated`` marks an expanded node whose children exist but were not
    emitted because the depth cutoff was reached.
    """

    node_id: NodeId
    label: str
    depth: int
    has_children: bool
    is_expanded: bool
    truncated: bool = False
    node: TreeNode | None = field(default=None, compare=False, repr=False)

    @property
    def shows_children(self) -> bool:
        """True when this node's children follow it in the emitted sequence."""
        return self.has_children and self.is_expanded and not self.truncated

    def as_dict(self) -> dict[str, Any]:
        return {
            "node_id": self.node_id,
            "label": self.label,
            "depth": self.depth,
            "has_children": self.has_children,
            "is_expanded": self.is_expanded,
            "truncated": self.truncated,
        }

"""Domain types for the tree formatter."""

from .errors import MalformedTreeError, TreelineError
from .instructions import RenderInstruction
from .nodes import (
    SYNTHETIC_ROOT_ID,
    MenuNode,
    NodeId,
    ThreadNode,
    TreeNode,
    ViewKind,
    parse_tree,
)

__all__ = [
    "SYNTHETIC_ROOT_ID",
    "MalformedTreeError",
    "MenuNode",
    "NodeId",
    "RenderInstruction",
    "ThreadNode",
    "TreeNode",
    "TreelineError",
    "ViewKind",
    "parse_tree",
]

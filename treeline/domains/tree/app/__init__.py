"""Tree traversal and render sessions."""

from .session import TreeSession
from .traversal import MAX_TRAVERSAL_DEPTH, iter_nodes, iter_render, render

__all__ = [
    "MAX_TRAVERSAL_DEPTH",
    "TreeSession",
    "iter_nodes",
    "iter_render",
    "render",
]

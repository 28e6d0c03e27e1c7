"""Depth-first traversal producing render instructions."""

from __future__ import annotations

import logging
from typing import Iterator

from treeline.domains.tree.domain.errors import MalformedTreeError
from treeline.domains.tree.domain.instructions import RenderInstruction
from treeline.domains.tree.domain.nodes import TreeNode
from treeline.domains.tree.state.expansion import TreeState

logger = logging.getLogger(__name__)

# Hard ceiling on path length, applied to every view kind.
MAX_TRAVERSAL_DEPTH = 10_000


def _check_max_depth(max_depth: int | None) -> None:
    if max_depth is not None and max_depth < 0:
        raise ValueError(f"max_depth must be >= 0 or None, got {max_depth}")


def iter_render(
    root: TreeNode,
    state: TreeState,
    max_depth: int | None = None,
    *,
    depth_limit: int = MAX_TRAVERSAL_DEPTH,
) -> Iterator[RenderInstruction]:
    """Yield render instructions for ``root`` in pre-order.

    Children of a node are visited only when the node is expanded in
    ``state`` and ``depth + 1 <= max_depth``. An expanded node that has
    children but sits at the cutoff is yielded with ``truncated=True``.
    ``max_depth=None`` disables the cutoff.

    The walk uses an explicit stack. ``path`` holds the node objects from the
    root down to the node being visited, so a node found among its own
    ancestors is reported instead of looping.

    Raises:
        MalformedTreeError: On a cycle or a path deeper than ``depth_limit``.
        ValueError: If ``max_depth`` is negative.
    """
    _check_max_depth(max_depth)

    path: list[int] = []
    on_path: set[int] = set()
    stack: list[tuple[TreeNode, int]] = [(root, 0)]

    while stack:
        node, depth = stack.pop()

        while len(path) > depth:
            on_path.discard(path.pop())
        if id(node) in on_path:
            raise MalformedTreeError("node is its own ancestor", node_id=node.id)
        if depth > depth_limit:
            raise MalformedTreeError(f"tree is deeper than {depth_limit} levels", node_id=node.id)
        path.append(id(node))
        on_path.add(id(node))

        children = node.children or []
        has_children = len(children) > 0
        is_expanded = state.is_expanded(node.id)
        truncated = has_children and is_expanded and max_depth is not None and depth + 1 > max_depth

        yield RenderInstruction(
            node_id=node.id,
            label=node.display_label,
            depth=depth,
            has_children=has_children,
            is_expanded=is_expanded,
            truncated=truncated,
            node=node,
        )

        if has_children and is_expanded and not truncated:
            for child in reversed(children):
                stack.append((child, depth + 1))


def render(
    root: TreeNode,
    state: TreeState,
    max_depth: int | None = None,
    *,
    depth_limit: int = MAX_TRAVERSAL_DEPTH,
) -> list[RenderInstruction]:
    """Return the full visible instruction sequence for ``root``."""
    instructions = list(iter_render(root, state, max_depth, depth_limit=depth_limit))
    logger.debug(
        "rendered %d instruction(s) from root %r (max_depth=%s)",
        len(instructions),
        root.id,
        max_depth,
    )
    return instructions


def iter_nodes(root: TreeNode, depth_limit: int = MAX_TRAVERSAL_DEPTH) -> Iterator[TreeNode]:
    """Yield every node in the data in pre-order, ignoring expansion state.

    A node object shared by two branches is yielded once per branch, as in
    ``iter_render``; only a node among its own ancestors is rejected.

    Raises:
        MalformedTreeError: On a cycle or a path deeper than ``depth_limit``.
    """
    path: list[int] = []
    on_path: set[int] = set()
    stack: list[tuple[TreeNode, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        while len(path) > depth:
            on_path.discard(path.pop())
        if id(node) in on_path:
            raise MalformedTreeError("node is its own ancestor", node_id=node.id)
        if depth > depth_limit:
            raise MalformedTreeError(f"tree is deeper than {depth_limit} levels", node_id=node.id)
        path.append(id(node))
        on_path.add(id(node))
        yield node
        for child in reversed(node.children or []):
            stack.append((child, depth + 1))

"""Render session: one tree, one expansion state, one view configuration."""

from __future__ import annotations

import logging
from typing import Callable, Hashable

from rich.text import Text

from treeline.config import PRESETS, ViewConfig
from treeline.domains.tree.domain.instructions import RenderInstruction
from treeline.domains.tree.domain.nodes import SYNTHETIC_ROOT_ID, NodeId, TreeNode, ViewKind
from treeline.domains.tree.state.expansion import TreeState
from treeline.domains.tree.ui.emitter import format_line

from .traversal import MAX_TRAVERSAL_DEPTH, iter_nodes, render

logger = logging.getLogger(__name__)

ContinueHandler = Callable[[NodeId], None]


def log_continue_request(node_id: NodeId) -> None:
    logger.info("navigate to full thread requested for node %r", node_id)


class TreeSession:
    """Owns the transient state of one rendered view.

    The tree itself is owned by the caller and only read. ``toggle`` is the
    only way expansion state changes; ``expand_all`` and ``collapse_all`` are
    expressed as toggles of the nodes whose flag differs.
    """

    def __init__(
        self,
        root: TreeNode,
        config: ViewConfig | None = None,
        *,
        on_continue: ContinueHandler | None = None,
        depth_limit: int = MAX_TRAVERSAL_DEPTH,
    ) -> None:
        self.root = root
        self.config = config or PRESETS[ViewKind.TREE]
        self.state = TreeState(default_expanded=self.config.default_expanded)
        self.on_continue = on_continue or log_continue_request
        self.depth_limit = depth_limit
        self._reply_forms: set[Hashable] = set()
        # A synthetic root only groups top-level items, so it starts open.
        if root.id == SYNTHETIC_ROOT_ID and not self.state.is_expanded(root.id):
            self.state.toggle(root.id)

    def render(self) -> list[RenderInstruction]:
        return render(self.root, self.state, self.config.max_depth, depth_limit=self.depth_limit)

    def toggle(self, node_id: NodeId) -> bool:
        return self.state.toggle(node_id)

    def is_expanded(self, node_id: NodeId) -> bool:
        return self.state.is_expanded(node_id)

    def continue_thread(self, node_id: NodeId) -> None:
        """Hand a truncated node to the host's navigation collaborator."""
        self.on_continue(node_id)

    def activate(self, instruction: RenderInstruction) -> None:
        """Respond to the host activating a line (click or enter).

        Truncated lines go to ``on_continue``; branches toggle; leaves do nothing.
        """
        if instruction.truncated:
            self.continue_thread(instruction.node_id)
        elif instruction.has_children:
            self.toggle(instruction.node_id)

    def toggle_reply_form(self, node_id: NodeId) -> bool:
        """Open or close the reply form for a comment. Does not affect traversal."""
        if node_id in self._reply_forms:
            self._reply_forms.discard(node_id)
            return False
        self._reply_forms.add(node_id)
        return True

    def is_reply_form_open(self, node_id: NodeId) -> bool:
        return node_id in self._reply_forms

    def _set_all(self, expanded: bool, *, root_expanded: bool) -> int:
        changed = 0
        for node in iter_nodes(self.root, self.depth_limit):
            target = root_expanded if node is self.root else expanded
            if node.children and self.state.is_expanded(node.id) != target:
                self.state.toggle(node.id)
                changed += 1
        return changed

    def expand_all(self) -> int:
        """Expand every branch in the data. Returns the number of toggles."""
        return self._set_all(True, root_expanded=True)

    def collapse_all(self) -> int:
        """Collapse every branch except the root. Returns the number of toggles."""
        return self._set_all(False, root_expanded=True)

    def lines(self, instructions: list[RenderInstruction] | None = None) -> list[Text]:
        if instructions is None:
            instructions = self.render()
        return [
            format_line(
                instruction,
                self.config.icons,
                self.config.indent,
                reply_form_open=self.is_reply_form_open(instruction.node_id),
            )
            for instruction in instructions
        ]

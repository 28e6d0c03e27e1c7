"""Textual widget that hosts a tree render session."""

from __future__ import annotations

from textual.binding import Binding
from textual.widgets import OptionList
from textual.widgets.option_list import Option

from treeline.domains.tree.app.session import TreeSession
from treeline.domains.tree.domain.instructions import RenderInstruction
from treeline.domains.tree.domain.nodes import NodeId, ViewKind


class TreeFormatterView(OptionList):
    """Draws emitted lines and routes selection back into the session.

    Every change re-runs the full traversal and rebuilds the option list.
    """

    BINDINGS = [
        Binding("e", "expand_all", "Expand all"),
        Binding("c", "collapse_all", "Collapse all"),
        Binding("r", "toggle_reply", "Reply", show=False),
    ]

    DEFAULT_CSS = """
    TreeFormatterView {
        height: auto;
        max-height: 20;
        background: $surface;
        border: none;
        padding: 0;
    }

    TreeFormatterView > .option-list--option {
        padding: 0 1;
    }
    """

    def __init__(
        self,
        session: TreeSession,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self.session = session
        self._instructions: list[RenderInstruction] = []

    @property
    def instructions(self) -> list[RenderInstruction]:
        return list(self._instructions)

    def on_mount(self) -> None:
        self.refresh_lines()

    def refresh_lines(self) -> None:
        """Re-render from the root and keep the cursor on the same node."""
        previous = self._highlighted_node_id()
        self._instructions = self.session.render()
        self.clear_options()
        self.add_options([Option(line) for line in self.session.lines(self._instructions)])
        if previous is not None:
            for index, instruction in enumerate(self._instructions):
                if instruction.node_id == previous:
                    self.highlighted = index
                    break

    def _highlighted_node_id(self) -> NodeId | None:
        index = self.highlighted
        if index is None or not 0 <= index < len(self._instructions):
            return None
        return self._instructions[index].node_id

    def activate_index(self, index: int) -> None:
        """Activate the line at ``index`` as if the user selected it."""
        if not 0 <= index < len(self._instructions):
            return
        self.session.activate(self._instructions[index])
        self.refresh_lines()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.activate_index(event.option_index)

    def action_expand_all(self) -> None:
        self.session.expand_all()
        self.refresh_lines()

    def action_collapse_all(self) -> None:
        self.session.collapse_all()
        self.refresh_lines()

    def action_toggle_reply(self) -> None:
        if self.session.config.kind != ViewKind.THREAD:
            return
        node_id = self._highlighted_node_id()
        if node_id is None:
            return
        self.session.toggle_reply_form(node_id)
        self.refresh_lines()

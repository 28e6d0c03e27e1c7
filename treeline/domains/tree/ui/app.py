"""Demo app showing the file explorer, comment thread and nested menu views."""

from __future__ import annotations

from typing import Any, Mapping

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Static

from treeline.config import load_view_config
from treeline.domains.tree.app.session import TreeSession
from treeline.domains.tree.domain.nodes import NodeId, ViewKind, parse_tree
from treeline.domains.tree.samples import COMMENT_DATA, FILE_SYSTEM_DATA, MENU_DATA

from .widget import TreeFormatterView

SECTIONS: list[tuple[str, ViewKind, Any]] = [
    ("File Explorer", ViewKind.TREE, FILE_SYSTEM_DATA),
    ("Comment Thread", ViewKind.THREAD, COMMENT_DATA),
    ("Nested Menu", ViewKind.MENU, MENU_DATA),
]


class TreelineDemoApp(App):
    """Three tree views side by side, each with its own session."""

    TITLE = "treeline"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("tab", "focus_next", "Next view", show=False),
    ]

    CSS = """
    #demo-scroll {
        padding: 1 2;
    }

    .section-title {
        text-style: bold;
        margin-top: 1;
    }
    """

    def __init__(self, settings: Mapping[str, Any] | None = None) -> None:
        super().__init__()
        self.sessions: dict[ViewKind, TreeSession] = {}
        self.continue_requests: list[NodeId] = []
        for _title, kind, data in SECTIONS:
            config = load_view_config(kind, settings)
            self.sessions[kind] = TreeSession(
                parse_tree(data, kind, root_label="Menu"),
                config,
                on_continue=self._on_continue_thread,
            )

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="demo-scroll"):
            for title, kind, _data in SECTIONS:
                yield Static(title, classes="section-title")
                yield TreeFormatterView(self.sessions[kind], id=f"view-{kind.value}")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one(f"#view-{ViewKind.TREE.value}", TreeFormatterView).focus()

    def _on_continue_thread(self, node_id: NodeId) -> None:
        self.continue_requests.append(node_id)
        self.notify(f"Navigate to thread {node_id}", title="Continue Thread")

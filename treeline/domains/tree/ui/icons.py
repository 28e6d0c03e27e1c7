"""Icon sets used by the line emitter."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IconSet:
    leaf: str
    collapsed: str
    expanded: str
    continue_text: str = "Continue Thread →"

    def for_state(self, has_children: bool, is_expanded: bool) -> str:
        if not has_children:
            return self.leaf
        return self.expanded if is_expanded else self.collapsed


FILE_ICONS = IconSet(leaf="📄", collapsed="📁", expanded="📂")
THREAD_ICONS = IconSet(leaf="•", collapsed="▸", expanded="▾")
MENU_ICONS = IconSet(leaf="-", collapsed="+", expanded="−")

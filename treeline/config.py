"""View configuration for treeline.

Each view kind has a built-in preset (default expansion, depth cutoff, indent
and icons). Presets can be overridden from the ``views`` key of the settings
file, see ``treeline.stores.settings``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .domains.tree.domain.nodes import ViewKind
from .domains.tree.ui.icons import FILE_ICONS, MENU_ICONS, THREAD_ICONS, IconSet

DEFAULT_INDENT = 2
THREAD_MAX_DEPTH = 3


@dataclass(frozen=True)
class ViewConfig:
    """Per-instantiation configuration of a tree view."""

    kind: ViewKind
    default_expanded: bool = False
    max_depth: int | None = None
    indent: int = DEFAULT_INDENT
    icons: IconSet = field(default=FILE_ICONS)

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0 or None, got {self.max_depth}")
        if self.indent < 1:
            raise ValueError(f"indent must be >= 1, got {self.indent}")

    @property
    def is_depth_bounded(self) -> bool:
        return self.max_depth is not None


PRESETS: dict[ViewKind, ViewConfig] = {
    ViewKind.TREE: ViewConfig(kind=ViewKind.TREE, default_expanded=False, icons=FILE_ICONS),
    ViewKind.THREAD: ViewConfig(
        kind=ViewKind.THREAD,
        default_expanded=True,
        max_depth=THREAD_MAX_DEPTH,
        icons=THREAD_ICONS,
    ),
    ViewKind.MENU: ViewConfig(kind=ViewKind.MENU, default_expanded=False, icons=MENU_ICONS),
}


def _coerce_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _coerce_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def apply_overrides(config: ViewConfig, overrides: Mapping[str, Any]) -> ViewConfig:
    """Return ``config`` with recognised keys from ``overrides`` applied.

    ``max_depth`` accepts an integer or null (unbounded). ``icons`` accepts a
    partial mapping of ``leaf``/``collapsed``/``expanded``/``continue_text``.
    Unknown keys are ignored.
    """
    changes: dict[str, Any] = {}
    if "default_expanded" in overrides:
        changes["default_expanded"] = _coerce_bool("default_expanded", overrides["default_expanded"])
    if "max_depth" in overrides:
        value = overrides["max_depth"]
        changes["max_depth"] = None if value is None else _coerce_int("max_depth", value)
    if "indent" in overrides:
        changes["indent"] = _coerce_int("indent", overrides["indent"])
    icons = overrides.get("icons")
    if isinstance(icons, Mapping):
        icon_changes = {
            k: str(v) for k, v in icons.items() if k in ("leaf", "collapsed", "expanded", "continue_text")
        }
        changes["icons"] = replace(config.icons, **icon_changes)
    return replace(config, **changes) if changes else config


def load_view_config(kind: ViewKind | str, settings: Mapping[str, Any] | None = None) -> ViewConfig:
    """Build the effective config for ``kind``.

    Args:
        kind: View kind (``tree``, ``thread`` or ``menu``).
        settings: Settings mapping. Loaded from the settings file when None.

    Raises:
        ValueError: For an unknown kind or an invalid override value.
    """
    view_kind = ViewKind(kind)
    if settings is None:
        from .stores.settings import load_settings

        settings = load_settings()
    views = settings.get("views", {})
    overrides = views.get(view_kind.value, {}) if isinstance(views, Mapping) else {}
    if not isinstance(overrides, Mapping):
        overrides = {}
    return apply_overrides(PRESETS[view_kind], overrides)

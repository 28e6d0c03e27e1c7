"""Settings store for view configuration overrides."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from treeline.shared.core.store import CONFIG_DIR, JSONFileStore


def _resolve_settings_path() -> Path:
    override = os.environ.get("TREELINE_SETTINGS_PATH", "").strip()
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "settings.json"


class SettingsStore(JSONFileStore):
    """Store for treeline settings.

    Settings are stored as a JSON object in ~/.treeline/settings.json.
    Per-view overrides live under the ``views`` key, for example
    ``{"views": {"thread": {"max_depth": 5}}}``.
    """

    def __init__(self, file_path: Path | None = None) -> None:
        super().__init__(file_path or _resolve_settings_path())

    def load_all(self) -> dict[str, Any]:
        """Load all settings, or an empty dict if none exist."""
        data = self._read_json()
        return data if isinstance(data, dict) else {}

    def save_all(self, settings: dict[str, Any]) -> None:
        self._write_json(settings)

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_all().get(key, default)

    def view_overrides(self, kind: str) -> dict[str, Any]:
        """Return the override mapping for one view kind (may be empty)."""
        views = self.get("views", {})
        if not isinstance(views, dict):
            return {}
        overrides = views.get(kind, {})
        return overrides if isinstance(overrides, dict) else {}

    def set_view_override(self, kind: str, key: str, value: Any) -> None:
        settings = self.load_all()
        views = settings.get("views")
        if not isinstance(views, dict):
            views = {}
        view = views.get(kind)
        if not isinstance(view, dict):
            view = {}
        view[key] = value
        views[kind] = view
        settings["views"] = views
        self.save_all(settings)


_store: SettingsStore | None = None
_store_path: Path | None = None


def _get_store() -> SettingsStore:
    global _store, _store_path
    path = _resolve_settings_path()
    if _store is None or _store_path != path:
        _store = SettingsStore(file_path=path)
        _store_path = path
    return _store


def load_settings() -> dict:
    """Load settings from the config file."""
    return _get_store().load_all()

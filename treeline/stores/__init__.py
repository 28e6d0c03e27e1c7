"""Data persistence stores for treeline.

Only settings are persisted; expansion state is session-scoped and never
written to disk.
"""

from .settings import SettingsStore

__all__ = [
    "SettingsStore",
]

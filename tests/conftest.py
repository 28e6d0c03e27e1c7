"""Pytest configuration for treeline tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

_TEST_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="treeline-test-config-"))
os.environ.setdefault("TREELINE_CONFIG_DIR", str(_TEST_CONFIG_DIR))
os.environ.pop("TREELINE_SETTINGS_PATH", None)


@pytest.fixture(autouse=True)
def _isolated_settings_path(monkeypatch, tmp_path):
    """Point the settings store at an empty per-test file."""
    monkeypatch.setenv("TREELINE_SETTINGS_PATH", str(tmp_path / "settings.json"))
    yield

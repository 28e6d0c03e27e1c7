"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest

from treeline.cli import main
from treeline.domains.tree.samples import COMMENT_DATA, FILE_SYSTEM_DATA, MENU_DATA


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name="tree.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)

    return _write


class TestRenderCommand:
    def test_plain_output_default_collapsed(self, write_json, capsys):
        assert main(["render", write_json(FILE_SYSTEM_DATA), "--format", "plain"]) == 0
        assert capsys.readouterr().out.splitlines() == ["📁 Root"]

    def test_toggle_and_expand_all(self, write_json, capsys):
        path = write_json(FILE_SYSTEM_DATA)
        assert main(["render", path, "--format", "plain", "--expand-all", "--toggle", "2"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "📂 Root",
            "  📁 Documents",
            "  📂 Images",
            "    📄 photo.jpg",
        ]

    def test_thread_json_output(self, write_json, capsys):
        assert main(["render", write_json(COMMENT_DATA), "--view", "thread", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["node_id"] for r in rows] == ["1", "2", "3", "4"]
        assert rows[-1]["truncated"] is True
        assert rows[-1]["depth"] == 3

    def test_unbounded_thread(self, write_json, capsys):
        path = write_json(COMMENT_DATA)
        assert main(["render", path, "--view", "thread", "--unbounded", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["node_id"] for r in rows] == ["1", "2", "3", "4", "5"]
        assert not any(r["truncated"] for r in rows)

    def test_max_depth_override(self, write_json, capsys):
        path = write_json(COMMENT_DATA)
        assert main(["render", path, "--view", "thread", "--max-depth", "1", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["node_id"] for r in rows] == ["1", "2"]
        assert rows[-1]["truncated"] is True

    def test_integer_ids_can_be_toggled(self, write_json, capsys):
        path = write_json({"id": 1, "label": "root", "children": [{"id": 2, "label": "leaf"}]})
        assert main(["render", path, "--toggle", "1", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert [r["node_id"] for r in rows] == [1, 2]

    def test_menu_list_input(self, write_json, capsys):
        assert main(["render", write_json(MENU_DATA), "--view", "menu", "--format", "plain"]) == 0
        assert capsys.readouterr().out.splitlines() == ["− (root)", "  + File", "  + Edit"]

    def test_settings_file_applies(self, write_json, tmp_path, capsys):
        settings = tmp_path / "custom.json"
        settings.write_text(json.dumps({"views": {"tree": {"default_expanded": True, "indent": 4}}}))
        path = write_json({"id": "a", "label": "A", "children": [{"id": "b", "label": "B"}]})
        assert main(["--settings", str(settings), "render", path, "--format", "plain"]) == 0
        assert capsys.readouterr().out.splitlines() == ["📂 A", "    📄 B"]


class TestRenderErrors:
    def test_missing_file(self, tmp_path, capsys):
        assert main(["render", str(tmp_path / "missing.json")]) == 1
        assert "could not read" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{")
        assert main(["render", str(path)]) == 1

    def test_malformed_tree(self, write_json, capsys):
        assert main(["render", write_json({"label": "no id"})]) == 1
        assert "Malformed tree" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"id": "\xff\xfe"}')
        assert main(["render", str(path)]) == 1
        assert "could not read" in capsys.readouterr().err

    def test_unreadable_settings_path(self, write_json, tmp_path, capsys):
        path = write_json(FILE_SYSTEM_DATA)
        assert main(["--settings", str(tmp_path), "render", path]) == 1
        assert "could not read settings" in capsys.readouterr().err


class TestConfigCommand:
    def test_set_then_render_uses_override(self, write_json, capsys):
        assert main(["config", "set", "thread", "max_depth", "null"]) == 0
        assert capsys.readouterr().out.strip() == "thread.max_depth = null"

        assert main(["render", write_json(COMMENT_DATA), "--view", "thread", "--format", "json"]) == 0
        rows = json.loads(capsys.readouterr().out)
        assert not any(row["truncated"] for row in rows)

    def test_set_writes_settings_file(self, tmp_path):
        settings = tmp_path / "custom.json"
        assert main(["--settings", str(settings), "config", "set", "tree", "indent", "4"]) == 0
        assert main(["--settings", str(settings), "config", "set", "tree", "icons", '{"leaf": "*"}']) == 0

        data = json.loads(settings.read_text())
        assert data == {"views": {"tree": {"indent": 4, "icons": {"leaf": "*"}}}}

    def test_show_reports_effective_values(self, capsys):
        assert main(["config", "set", "menu", "default_expanded", "true"]) == 0
        capsys.readouterr()

        assert main(["config", "show", "menu"]) == 0
        shown = json.loads(capsys.readouterr().out)
        assert shown == {"view": "menu", "default_expanded": True, "max_depth": None, "indent": 2}

    def test_show_all_views(self, capsys):
        assert main(["config", "show"]) == 0
        views = [json.loads(line)["view"] for line in capsys.readouterr().out.splitlines()]
        assert views == ["tree", "thread", "menu"]

    @pytest.mark.parametrize(
        "key, value",
        [
            ("indent", "0"),
            ("indent", "wide"),
            ("max_depth", "-1"),
            ("default_expanded", "1"),
            ("icons", '"*"'),
        ],
    )
    def test_invalid_value_rejected(self, tmp_path, capsys, key, value):
        settings = tmp_path / "custom.json"
        assert main(["--settings", str(settings), "config", "set", "tree", key, value]) == 1
        assert "Error" in capsys.readouterr().err
        assert not settings.exists()

    def test_unknown_key_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["config", "set", "tree", "colour", "red"])
        assert exc_info.value.code == 2

    def test_unwritable_settings_path(self, tmp_path, capsys):
        assert main(["--settings", str(tmp_path), "config", "set", "tree", "indent", "3"]) == 1
        assert "Error" in capsys.readouterr().err

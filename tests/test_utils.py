"""Unit tests for utility functions (docbuilder.utils).

Tests cover:
- sanitize_name / database_name / title_case
- load_json / save_json (use tmp_path)
- ensure_dir
- Rich output helpers
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docbuilder.utils import (
    database_name,
    ensure_dir,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    sanitize_name,
    save_json,
    title_case,
)


# ---------------------------------------------------------------------------
# Name helpers
# ---------------------------------------------------------------------------


class TestSanitizeName:
    @pytest.mark.unit
    def test_simple_name(self):
        assert sanitize_name("Acme Portal") == "acme-portal"

    @pytest.mark.unit
    def test_multiple_spaces(self):
        assert sanitize_name("  My   App ") == "my-app"

    @pytest.mark.unit
    def test_punctuation_kept(self):
        assert sanitize_name("My App 2.0") == "my-app-2.0"

    @pytest.mark.unit
    def test_empty_string(self):
        assert sanitize_name("") == ""


class TestDatabaseName:
    @pytest.mark.unit
    def test_underscores(self):
        assert database_name("Acme Portal") == "acme_portal"

    @pytest.mark.unit
    def test_tabs_and_newlines(self):
        assert database_name("Acme\tBig\nPortal") == "acme_big_portal"


class TestTitleCase:
    @pytest.mark.unit
    def test_first_letter_only(self):
        assert title_case("react") == "React"
        assert title_case("nextJS") == "NextJS"

    @pytest.mark.unit
    def test_empty(self):
        assert title_case("") == ""


# ---------------------------------------------------------------------------
# load_json / save_json
# ---------------------------------------------------------------------------


class TestJsonIO:
    @pytest.mark.unit
    def test_round_trip_keeps_unicode(self, tmp_path: Path):
        path = save_json({"/README.md": "✅ Ready"}, tmp_path / "nested" / "d.json")
        assert "✅" in path.read_text(encoding="utf-8")
        assert load_json(path) == {"/README.md": "✅ Ready"}

    @pytest.mark.unit
    def test_load_list_wrapped(self, tmp_path: Path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2]), encoding="utf-8")
        assert load_json(path) == {"_root": [1, 2]}

    @pytest.mark.unit
    def test_load_missing_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_json(tmp_path / "absent.json")

    @pytest.mark.unit
    def test_load_invalid_raises(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(json.JSONDecodeError):
            load_json(path)


class TestEnsureDir:
    @pytest.mark.unit
    def test_creates_nested(self, tmp_path: Path):
        result = ensure_dir(tmp_path / "a" / "b")
        assert result.is_dir()
        assert result.is_absolute()

    @pytest.mark.unit
    def test_existing_ok(self, tmp_path: Path):
        assert ensure_dir(tmp_path) == tmp_path.resolve()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestRichOutputHelpers:
    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"Files": "58"}, title="Docs")
        out = capsys.readouterr().out
        assert "Files" in out
        assert "58" in out

    @pytest.mark.unit
    def test_print_success(self, capsys):
        print_success("Exported")
        assert "Exported" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_error(self, capsys):
        print_error("Broken")
        assert "Broken" in capsys.readouterr().out

    @pytest.mark.unit
    def test_print_warning(self, capsys):
        print_warning("Careful")
        assert "Careful" in capsys.readouterr().out

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : test_plan_io.py
#   file_relpath : tests/config/test_plan_io.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Tests for plan TOML I/O helpers."""

from __future__ import annotations

import tomlkit

from profilemark.config.io import load_default_plan_text, parse_toml_text, to_toml
from profilemark.constants import PROFILEMARK_END_MARKER


def test_default_plan_text_has_no_file_header() -> None:
    text = load_default_plan_text()

    assert PROFILEMARK_END_MARKER not in text
    assert text.startswith("# ProfileMark provisioning plan.")
    assert 'profile = "~/.bashrc"' in text


def test_to_toml_drops_none_and_uses_literal_multiline() -> None:
    text = to_toml({"a": None, "b": ["x", None], "c": {"body": "line 1\nline 2\n", "d": None}})

    assert "a =" not in text
    assert "d =" not in text
    assert "'''" in text
    assert parse_toml_text(text, source="t") == {"b": ["x"], "c": {"body": "line 1\nline 2\n"}}


def test_to_toml_body_starting_with_blank_line() -> None:
    text = to_toml({"body": "\nx\n"})

    assert parse_toml_text(text, source="t") == {"body": "\nx\n"}


def test_to_toml_falls_back_when_body_has_triple_quotes() -> None:
    body = "echo '''\nok\n"

    text = to_toml({"body": body})

    assert tomlkit.parse(text)["body"] == body

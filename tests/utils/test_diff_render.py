# profilemark:header:start
#
#   project      : ProfileMark
#   file         : test_diff_render.py
#   file_relpath : tests/utils/test_diff_render.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Tests for unified diff generation and rendering."""

from __future__ import annotations

from profilemark.utils.diff import make_patch, render_patch


def test_identical_contents_have_no_patch() -> None:
    assert make_patch("a\n", "a\n", "x") == []


def test_patch_headers_and_added_lines() -> None:
    patch = make_patch("a\n", "a\nb\n", "~/.bashrc")

    assert patch[0].startswith("--- ~/.bashrc (current)")
    assert patch[1].startswith("+++ ~/.bashrc (updated)")
    assert "+b\n" in patch


def test_render_patch_keeps_text_and_marks_cr() -> None:
    rendered = render_patch(["+x\r\n", " y\n"], show_line_numbers=True)

    assert "x\\r" in rendered
    assert "0001|" in rendered
    assert rendered.count("\n") == 2

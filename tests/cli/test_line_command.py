# profilemark:header:start
#
#   project      : ProfileMark
#   file         : test_line_command.py
#   file_relpath : tests/cli/test_line_command.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""CLI ``line`` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, assert_WOULD_CHANGE, run_cli
from tests.conftest import mark_cli, read_raw, write_raw

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = mark_cli

ZOXIDE_LINE = 'eval "$(zoxide init bash)"'


def test_line_appended_with_apply(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    write_raw(profile, "alias foo=bar\n")

    result = run_cli(
        ["line", ZOXIDE_LINE, "--pattern", "zoxide init", "--apply", "--profile", str(profile)]
    )

    assert_SUCCESS(result)
    assert "line added" in result.output
    assert read_raw(profile) == f"alias foo=bar\n{ZOXIDE_LINE}\n"


def test_line_dry_run(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    write_raw(profile, "alias foo=bar\n")

    result = run_cli(["line", ZOXIDE_LINE, "--diff", "--profile", str(profile)])

    assert_WOULD_CHANGE(result)
    assert f"+{ZOXIDE_LINE}" in result.output
    assert read_raw(profile) == "alias foo=bar\n"


def test_equivalent_line_already_present(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    write_raw(profile, 'eval "$(zoxide init bash --cmd cd)"\n')
    args = ["line", ZOXIDE_LINE, "--regex", "--pattern", r"zoxide init \w+"]

    result = run_cli(["-v", *args, "--profile", str(profile)])

    assert_SUCCESS(result)
    assert "already configured" in result.output
    assert "[info]" in result.output


def test_bad_regex_is_usage_error(tmp_path: Path) -> None:
    result = run_cli(
        ["line", "x", "--regex", "--pattern", "(", "--profile", str(tmp_path / ".bashrc")]
    )

    assert_USAGE_ERROR(result)

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : test_block_command.py
#   file_relpath : tests/cli/test_block_command.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""CLI ``block`` command: dry run, apply, idempotence and ad-hoc blocks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from profilemark.core.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_SUCCESS,
    assert_USAGE_ERROR,
    assert_WOULD_CHANGE,
    run_cli,
    write_plan,
)
from tests.conftest import mark_cli, read_raw, write_raw

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = mark_cli

DEFAULT_START = "# --- Custom additions by setup script START ---"


def test_dry_run_exits_2_and_writes_nothing(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"

    result = run_cli(["block", "--profile", str(profile)])

    assert_WOULD_CHANGE(result)
    assert "setup-script: block added" in result.output
    assert "--apply" in result.output
    assert not profile.exists()


def test_apply_then_rerun_is_noop(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    write_raw(profile, "alias ll='ls -l'\n")

    first = run_cli(["block", "--apply", "--profile", str(profile)])
    content = read_raw(profile)
    second = run_cli(["block", "--profile", str(profile)])

    assert_SUCCESS(first)
    assert content.startswith("alias ll='ls -l'\n\n" + DEFAULT_START + "\n")
    assert_SUCCESS(second)
    assert "already configured" in second.output
    assert read_raw(profile) == content


def test_diff_shows_added_lines(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"

    result = run_cli(["block", "--diff", "--profile", str(profile)])

    assert_WOULD_CHANGE(result)
    assert f"+{DEFAULT_START}" in result.output
    assert "+export EDITOR=nvim" in result.output


def test_select_block_by_id_from_custom_plan(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    plan = write_plan(tmp_path)

    result = run_cli(
        ["block", "--apply", "--config", str(plan), "--id", "tools", "--profile", str(profile)]
    )

    assert_SUCCESS(result)
    assert read_raw(profile) == "\n# >>> tools\nexport A=1\n# <<< tools\n"


def test_unknown_block_id_is_usage_error(tmp_path: Path) -> None:
    result = run_cli(["block", "--id", "nope", "--profile", str(tmp_path / ".bashrc")])

    assert_USAGE_ERROR(result)
    assert "Unknown block id(s): nope" in result.output


def test_ad_hoc_block_from_stdin(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    args = ["block", "--start", "# >>> x", "--end", "# <<< x", "--body-file", "-"]

    result = run_cli([*args, "--apply", "--profile", str(profile)], input_text="a=1\nb=2\n")

    assert_SUCCESS(result)
    assert read_raw(profile) == "\n# >>> x\na=1\nb=2\n# <<< x\n"


def test_ad_hoc_block_needs_both_markers(tmp_path: Path) -> None:
    result = run_cli(["block", "--start", "# >>> x", "--profile", str(tmp_path / ".bashrc")])

    assert_USAGE_ERROR(result)


def test_ad_hoc_block_with_equal_markers_is_usage_error(tmp_path: Path) -> None:
    result = run_cli(
        ["block", "--start", "# x", "--end", "# x", "--profile", str(tmp_path / ".bashrc")]
    )

    assert_USAGE_ERROR(result)


def test_undecodable_profile_exits_65(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    profile.write_bytes(b"\xff\xfe broken\n")

    result = run_cli(["block", "--apply", "--profile", str(profile)])

    assert result.exit_code == ExitCode.ENCODING_ERROR, result.output
    assert "Resource unreadable" in result.output


def test_unwritable_location_exits_74(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    result = run_cli(["block", "--apply", "--profile", str(blocker / ".bashrc")])

    assert result.exit_code == ExitCode.IO_ERROR, result.output
    assert "Resource unwritable" in result.output


def test_collision_warning_is_shown(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    write_raw(profile, f"echo '{DEFAULT_START}'\n")

    result = run_cli(["block", "--profile", str(profile)])

    assert_WOULD_CHANGE(result)
    assert "[warning]" in result.output

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : test_provision_command.py
#   file_relpath : tests/cli/test_provision_command.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""CLI ``provision`` command with plans that need no real package manager."""

from __future__ import annotations

from typing import TYPE_CHECKING

from profilemark.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_WOULD_CHANGE, run_cli, write_plan
from tests.conftest import mark_cli, read_raw

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = mark_cli


def test_provision_preview_apply_and_rerun(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    args = ["provision", "--config", str(write_plan(tmp_path)), "--profile", str(profile)]

    preview = run_cli(args)
    applied = run_cli([*args, "--apply"])
    rerun = run_cli(args)

    assert_WOULD_CHANGE(preview)
    assert not profile.exists()
    assert_SUCCESS(applied)
    assert "Next steps:" in applied.output
    assert "open a new terminal" in applied.output
    assert read_raw(profile) == "\n# >>> tools\nexport A=1\n# <<< tools\nexport EDITOR=nvim\n"
    assert_SUCCESS(rerun)
    assert "already configured" in rerun.output


def test_provision_quiet_prints_no_steps(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    plan = write_plan(tmp_path)

    args = ["provision", "--apply", "--config", str(plan), "--profile", str(profile)]

    result = run_cli(["-q", *args])

    assert_SUCCESS(result)
    assert result.output == ""


def test_provision_failing_command_exits_69(tmp_path: Path) -> None:
    profile = tmp_path / ".bashrc"
    plan = write_plan(
        tmp_path,
        '[packages]\nupdate_command = ["profilemark-test-no-such-program"]\n'
        '\n[[blocks]]\nid = "t"\nstart = "# >>> t"\nend = "# <<< t"\n',
    )

    result = run_cli(["provision", "--apply", "--config", str(plan), "--profile", str(profile)])

    assert result.exit_code == ExitCode.COMMAND_FAILED, result.output
    assert "exit status 127" in result.output
    assert not profile.exists()


def test_provision_dry_run_lists_planned_commands(tmp_path: Path) -> None:
    plan = write_plan(
        tmp_path, '[packages]\ninstall_command = ["apt", "install"]\nnames = ["git"]\n'
    )

    result = run_cli(["provision", "--config", str(plan), "--profile", str(tmp_path / "p")])

    assert_WOULD_CHANGE(result)
    assert "packages   git: would run" in result.output


def test_invalid_plan_exits_78(tmp_path: Path) -> None:
    plan = write_plan(tmp_path, "[[blocks]]\nid = 'x'\n")

    result = run_cli(["provision", "--config", str(plan)])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "blocks[0].start" in result.output

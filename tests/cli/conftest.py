# profilemark:header:start
#
#   project      : ProfileMark
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""CLI test helpers for running ProfileMark through Click's test runner.

All helpers disable color so assertions can match plain text.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

from click.testing import CliRunner, Result

from profilemark.cli.main import cli
from profilemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

TEST_PLAN = """\
notes = ["open a new terminal"]

[[blocks]]
id = "tools"
start = "# >>> tools"
end = "# <<< tools"
body = '''
export A=1
'''

[[lines]]
pattern = "EDITOR="
line = "export EDITOR=nvim"
"""


def run_cli(argv: Sequence[str], *, input_text: str | bytes | IO[Any] | None = None) -> Result:
    """Invoke the CLI with color disabled.

    Args:
        argv (Sequence[str]): Arguments after the program name.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    return CliRunner().invoke(cli, ["--no-color", *argv], input=input_text)


def write_plan(tmp_path: Path, text: str = TEST_PLAN) -> Path:
    """Write a plan file into ``tmp_path`` and return its path."""
    path = tmp_path / "plan.toml"
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Click also exits with 2 on its own usage errors, which always carry an
    exception on the result.
    """
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output

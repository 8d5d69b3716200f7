# profilemark:header:start
#
#   project      : ProfileMark
#   file         : version.py
#   file_relpath : src/profilemark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``version`` command.

Prints the ProfileMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from profilemark.cli.console import get_console_safely
from profilemark.cli.utils import get_effective_verbosity
from profilemark.constants import PROFILEMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of ProfileMark.",
)
def version_command() -> None:
    """Show the current version of ProfileMark."""
    ctx = click.get_current_context()
    console = get_console_safely()
    vlevel = get_effective_verbosity(ctx)

    if vlevel > 0:
        console.print(console.styled("ProfileMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PROFILEMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(PROFILEMARK_VERSION, bold=True))

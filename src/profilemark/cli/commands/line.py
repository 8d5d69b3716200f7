# profilemark:header:start
#
#   project      : ProfileMark
#   file         : line.py
#   file_relpath : src/profilemark/cli/commands/line.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``line`` command.

Appends a single directive line to a shell profile unless an equivalent line is
already there. Equivalence is decided by ``--pattern`` (a substring, or a regular
expression with ``--regex``), which defaults to the line itself, so lines
written by other installers in a slightly different form are recognized.

Examples:

    $ profilemark line 'eval "$(starship init bash)"' --pattern 'starship init bash'
    $ profilemark line 'eval "$(zoxide init bash)"' --regex --pattern 'zoxide init' --apply
"""

from __future__ import annotations

import click

from profilemark.cli.errors import translate_errors
from profilemark.cli.options import CONTEXT_SETTINGS, common_apply_options, common_profile_options
from profilemark.cli.utils import exit_for_outcome, get_effective_verbosity, render_edit
from profilemark.profile import DirectiveLine, ProfileResource, ensure_line


@click.command(
    name="line",
    help="Ensure a directive line is present in the shell profile.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("line")
@click.option(
    "--pattern",
    default=None,
    help="Substring that identifies an existing equivalent line (default: LINE).",
)
@click.option("--regex", is_flag=True, help="Treat --pattern as a regular expression.")
@common_profile_options
@common_apply_options
def line_command(
    *,
    line: str,
    pattern: str | None,
    regex: bool,
    profile_path: str | None,
    apply_changes: bool,
    diff: bool,
) -> None:
    """Ensure LINE is present in the profile."""
    ctx = click.get_current_context()
    vlevel = get_effective_verbosity(ctx)

    with translate_errors():
        directive = DirectiveLine(pattern=pattern or line, line=line, regex=regex)
        result = ensure_line(ProfileResource.at(profile_path), directive, apply=apply_changes)

    render_edit(result, name=line, diff=diff, verbosity=vlevel)
    exit_for_outcome(changed=result.changed, apply_changes=apply_changes, verbosity=vlevel)

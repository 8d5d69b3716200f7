# profilemark:header:start
#
#   project      : ProfileMark
#   file         : status.py
#   file_relpath : src/profilemark/cli/commands/status.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``status`` command.

Reports, without writing anything, which plan blocks and directive lines are
present in the shell profile. Because installed blocks are never refreshed, an
installed block whose body differs from the plan is pointed out so the user can
strip and re-add it.

Exits with ``WOULD_CHANGE`` (2) when something is missing.
"""

from __future__ import annotations

import click

from profilemark.cli.console import get_console_safely
from profilemark.cli.errors import translate_errors
from profilemark.cli.options import CONTEXT_SETTINGS, common_plan_options, common_profile_options
from profilemark.cli.utils import get_effective_verbosity, load_plan_for
from profilemark.core.exit_codes import ExitCode
from profilemark.profile import find_block
from profilemark.provision import command_exists


@click.command(
    name="status",
    help="Show which plan blocks and lines are present in the shell profile.",
    context_settings=CONTEXT_SETTINGS,
)
@common_plan_options
@common_profile_options
def status_command(*, config_path: str | None, profile_path: str | None) -> None:
    """Inspect the profile against the plan."""
    ctx = click.get_current_context()
    console = get_console_safely()
    vlevel = get_effective_verbosity(ctx)

    missing = False
    with translate_errors():
        plan = load_plan_for(config_path, profile_path)
        resource = plan.resource()
        lines = resource.read_lines()
        spans = [(block, find_block(resource, block)) for block in plan.blocks]

    if vlevel >= 0:
        console.print(console.styled(f"Profile: {resource.path}", bold=True, underline=True))
        if not resource.exists():
            console.print(console.styled("  (does not exist yet)", fg="yellow"))

    for block, span in spans:
        if span is None:
            missing = True
            state = console.styled("missing", fg="red")
        elif span.end is None:
            state = console.styled(f"unterminated (line {span.start + 1})", fg="bright_red")
        elif span.body != block.body:
            state = console.styled(
                f"installed (line {span.start + 1}), body differs from plan", fg="yellow"
            )
        else:
            state = console.styled(f"installed (line {span.start + 1})", fg="green")
        if vlevel >= 0:
            console.print(f"  block {block.block_id}: {state}")

    for spec in plan.lines:
        directive = spec.directive
        found = next((i for i, line in enumerate(lines, 1) if directive.matches(line)), None)
        if found is not None:
            state = console.styled(f"present (line {found})", fg="green")
        elif spec.when_command and not command_exists(spec.when_command):
            state = console.styled(f"not needed ({spec.when_command} not installed)", fg="blue")
        else:
            missing = True
            state = console.styled("missing", fg="red")
        if vlevel >= 0:
            console.print(f"  line {directive.line}: {state}")

    if missing:
        ctx.exit(ExitCode.WOULD_CHANGE)

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : strip.py
#   file_relpath : src/profilemark/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``strip`` command.

Removes installed plan blocks (markers, body and the blank separator before
them) from the shell profile. Performs a dry run by default and writes with
``--apply``. Stripping and then ensuring a block again is how a stale body is
refreshed.

A block whose end marker is missing is left untouched and reported as an
error, since its extent cannot be known.
"""

from __future__ import annotations

import click

from profilemark.cli.errors import translate_errors
from profilemark.cli.options import (
    CONTEXT_SETTINGS,
    common_apply_options,
    common_plan_options,
    common_profile_options,
)
from profilemark.cli.utils import (
    exit_for_outcome,
    get_effective_verbosity,
    load_plan_for,
    render_edit,
    render_summary_counts,
    select_blocks,
)
from profilemark.core.diagnostics import DiagnosticLevel
from profilemark.core.exit_codes import ExitCode
from profilemark.profile import remove_block


@click.command(
    name="strip",
    help="Remove managed blocks from the shell profile.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview which blocks would be removed (dry-run)
  profilemark strip --diff

  # Remove one block, then install its current body again
  profilemark strip --id setup-script --apply
  profilemark block --id setup-script --apply
""",
)
@common_plan_options
@common_profile_options
@click.option(
    "--id", "block_ids", multiple=True, metavar="ID", help="Only remove these plan blocks."
)
@common_apply_options
def strip_command(
    *,
    config_path: str | None,
    profile_path: str | None,
    block_ids: tuple[str, ...],
    apply_changes: bool,
    diff: bool,
) -> None:
    """Remove plan blocks from the profile."""
    ctx = click.get_current_context()
    vlevel = get_effective_verbosity(ctx)

    with translate_errors():
        plan = load_plan_for(config_path, profile_path)
        blocks = select_blocks(plan, block_ids)
        resource = plan.resource()
        results = [remove_block(resource, block, apply=apply_changes) for block in blocks]

    for block, result in zip(blocks, results):
        render_edit(result, name=block.block_id, diff=diff, verbosity=vlevel)
    if vlevel > 0:
        render_summary_counts(
            [r.status for r in results], [d for r in results for d in r.diagnostics]
        )
    if any(d.level == DiagnosticLevel.ERROR for r in results for d in r.diagnostics):
        ctx.exit(ExitCode.FAILURE)
    exit_for_outcome(
        changed=any(r.changed for r in results), apply_changes=apply_changes, verbosity=vlevel
    )

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : block.py
#   file_relpath : src/profilemark/cli/commands/block.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``block`` command.

Ensures managed blocks are present in a shell profile. Blocks come from the
provisioning plan (all of them, or those selected with ``--id``), or are given
ad hoc with ``--start``/``--end`` and a body read from ``--body-file``.

An installed block is recognized by its start marker alone and is never
refreshed; use ``profilemark strip`` first to replace a stale body.

Examples:

    $ profilemark block                      # preview (dry run)
    $ profilemark block --apply --profile ~/.zshrc
    $ profilemark block --start '# >>> x' --end '# <<< x' --body-file x.sh --apply
"""

from __future__ import annotations

from typing import IO

import click

from profilemark.cli.errors import ProfilemarkUsageError, translate_errors
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
from profilemark.config.logging import get_logger
from profilemark.profile import ManagedBlock, ProfileResource, ensure_block

logger = get_logger(__name__)

AD_HOC_BLOCK_ID = "cli"


@click.command(
    name="block",
    help="Ensure managed blocks are present in the shell profile.",
    context_settings=CONTEXT_SETTINGS,
)
@common_plan_options
@common_profile_options
@click.option(
    "--id", "block_ids", multiple=True, metavar="ID", help="Only ensure these plan blocks."
)
@click.option("--start", "start_marker", default=None, help="Start marker of an ad-hoc block.")
@click.option("--end", "end_marker", default=None, help="End marker of an ad-hoc block.")
@click.option(
    "--body-file",
    type=click.File("r", encoding="utf-8"),
    default=None,
    help="Body of the ad-hoc block ('-' reads STDIN).",
)
@common_apply_options
def block_command(
    *,
    config_path: str | None,
    profile_path: str | None,
    block_ids: tuple[str, ...],
    start_marker: str | None,
    end_marker: str | None,
    body_file: IO[str] | None,
    apply_changes: bool,
    diff: bool,
) -> None:
    """Ensure plan or ad-hoc blocks, printing one outcome per block.

    Raises:
        ProfilemarkUsageError: If ad-hoc options are incomplete or mixed with ``--id``.
    """
    ctx = click.get_current_context()
    vlevel = get_effective_verbosity(ctx)

    ad_hoc = start_marker is not None or end_marker is not None or body_file is not None
    with translate_errors():
        if ad_hoc:
            if start_marker is None or end_marker is None:
                raise ProfilemarkUsageError("An ad-hoc block needs both --start and --end.")
            if block_ids or config_path:
                raise ProfilemarkUsageError(
                    "--start/--end cannot be combined with --id or --config."
                )
            body = body_file.read() if body_file is not None else ""
            blocks: tuple[ManagedBlock, ...] = (
                ManagedBlock.from_text(AD_HOC_BLOCK_ID, start_marker, end_marker, body),
            )
            resource = ProfileResource.at(profile_path)
        else:
            plan = load_plan_for(config_path, profile_path)
            blocks = select_blocks(plan, block_ids)
            resource = plan.resource()
        logger.debug("Ensuring %d block(s) in %s", len(blocks), resource.path)

        results = [ensure_block(resource, block, apply=apply_changes) for block in blocks]

    for block, result in zip(blocks, results):
        render_edit(result, name=block.block_id, diff=diff, verbosity=vlevel)
    if vlevel > 0:
        render_summary_counts(
            [r.status for r in results], [d for r in results for d in r.diagnostics]
        )
    exit_for_outcome(
        changed=any(r.changed for r in results), apply_changes=apply_changes, verbosity=vlevel
    )

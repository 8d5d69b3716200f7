# profilemark:header:start
#
#   project      : ProfileMark
#   file         : provision.py
#   file_relpath : src/profilemark/cli/commands/provision.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``provision`` command.

Runs the whole provisioning plan: package manager steps, vendor installers,
static files, managed blocks and directive lines, then prints the plan's
closing notes. Like the other editing commands it only previews by default;
``--apply`` runs commands and writes files.

Any failing external command aborts the run with exit code 69. Re-running is
safe: every step is skipped when already done.
"""

from __future__ import annotations

import click

from profilemark.cli.console import get_console_safely
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
    render_diagnostics,
    render_summary_counts,
    styled_status,
)
from profilemark.config.logging import get_logger
from profilemark.provision import run_plan
from profilemark.utils.diff import render_patch

logger = get_logger(__name__)


@click.command(
    name="provision",
    help="Run the provisioning plan: packages, installers, files and profile edits.",
    context_settings=CONTEXT_SETTINGS,
    epilog="""\
Examples:

  # Preview every step (dry-run)
  profilemark provision

  # Only edit the profile, leave packages and installers alone
  profilemark provision --skip-packages --skip-installers --apply
""",
)
@common_plan_options
@common_profile_options
@click.option("--skip-packages", is_flag=True, help="Skip package manager steps.")
@click.option("--skip-installers", is_flag=True, help="Skip vendor installers.")
@common_apply_options
def provision_command(
    *,
    config_path: str | None,
    profile_path: str | None,
    skip_packages: bool,
    skip_installers: bool,
    apply_changes: bool,
    diff: bool,
) -> None:
    """Run the plan and report each step."""
    ctx = click.get_current_context()
    console = get_console_safely()
    vlevel = get_effective_verbosity(ctx)

    with translate_errors():
        plan = load_plan_for(config_path, profile_path)
        logger.debug("Provisioning %s (apply=%s)", plan.profile, apply_changes)
        report = run_plan(
            plan,
            apply=apply_changes,
            skip_packages=skip_packages,
            skip_installers=skip_installers,
        )

    for outcome in report.outcomes:
        if vlevel >= 0:
            status = styled_status(console, outcome.status)
            line = f"{outcome.kind.value:<10} {outcome.name}: {status}"
            if outcome.detail:
                line += console.styled(f" ({outcome.detail})", dim=True)
            console.print(line)
        if outcome.edit is not None:
            render_diagnostics(outcome.edit.diagnostics, verbosity=vlevel)
            if diff and outcome.edit.changed:
                patch = outcome.edit.diff()
                console.print(
                    render_patch(patch) if console.enable_color else "".join(patch), nl=False
                )

    if vlevel > 0:
        render_summary_counts([o.status for o in report.outcomes], report.diagnostics)

    if report.notes and vlevel >= 0:
        console.print()
        console.print(console.styled("Next steps:", bold=True))
        for note in report.notes:
            console.print(f"  - {note}")

    exit_for_outcome(changed=report.changed, apply_changes=apply_changes, verbosity=vlevel)

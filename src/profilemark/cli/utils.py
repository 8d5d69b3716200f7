# profilemark:header:start
#
#   project      : ProfileMark
#   file         : utils.py
#   file_relpath : src/profilemark/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Rendering and exit helpers shared by the CLI commands."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING

import click

from profilemark.cli.console import get_console_safely
from profilemark.cli.errors import ProfilemarkUsageError
from profilemark.config.logging import get_logger
from profilemark.config.model import load_plan
from profilemark.core.diagnostics import DiagnosticLevel, count_by_level
from profilemark.core.exit_codes import ExitCode
from profilemark.utils.diff import render_patch

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from profilemark.cli.console import ConsoleLike
    from profilemark.config.model import ProvisionPlan
    from profilemark.core.diagnostics import Diagnostic
    from profilemark.profile.blocks import EditResult, ManagedBlock
    from profilemark.rendering.colored_enum import ColoredStrEnum

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when absent)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def load_plan_for(config_path: str | Path | None, profile_path: str | Path | None) -> ProvisionPlan:
    """Load the plan named by ``--config`` and retarget it at ``--profile``."""
    plan = load_plan(Path(config_path) if config_path else None)
    plan = plan.with_profile(profile_path)
    logger.debug("Plan targets profile %s", plan.profile)
    return plan


def select_blocks(plan: ProvisionPlan, block_ids: Sequence[str]) -> tuple[ManagedBlock, ...]:
    """Return the plan blocks named by ``block_ids``, or all of them when empty.

    Raises:
        ProfilemarkUsageError: If an id is not defined in the plan.
    """
    if not block_ids:
        return plan.blocks
    known = {b.block_id: b for b in plan.blocks}
    unknown = [i for i in block_ids if i not in known]
    if unknown:
        raise ProfilemarkUsageError(
            f"Unknown block id(s): {', '.join(unknown)} "
            f"(known: {', '.join(known) or 'none'})"
        )
    return tuple(known[i] for i in block_ids)


def styled_status(console: ConsoleLike, status: ColoredStrEnum) -> str:
    """Return the status text, colorized when the console allows it."""
    return status.render() if console.enable_color else status.value


def render_diagnostics(diagnostics: Iterable[Diagnostic], *, verbosity: int) -> None:
    """Print diagnostics: warnings and errors always, info only when verbose."""
    console = get_console_safely()
    for d in diagnostics:
        if d.level == DiagnosticLevel.INFO and verbosity < 1:
            continue
        text = f"   [{d.level.value}] {d.message}"
        if d.level == DiagnosticLevel.INFO:
            console.print(console.styled(text, fg="blue"))
        else:
            console.warn(text)


def render_edit(result: EditResult, *, name: str, diff: bool, verbosity: int) -> None:
    """Print the outcome of one profile edit, its diagnostics and optional diff."""
    console = get_console_safely()
    if verbosity >= 0:
        console.print(f"{result.resource.path}: {name}: {styled_status(console, result.status)}")
    render_diagnostics(result.diagnostics, verbosity=verbosity)
    if diff and result.changed:
        patch = result.diff()
        console.print(render_patch(patch) if console.enable_color else "".join(patch), nl=False)


def render_summary_counts(
    statuses: Sequence[ColoredStrEnum], diagnostics: Sequence[Diagnostic]
) -> None:
    """Print aligned counts by outcome, followed by diagnostic counts."""
    console = get_console_safely()
    counts = Counter(statuses)
    if not counts:
        return
    console.print()
    console.print(console.styled("Summary by outcome:", bold=True, underline=True))
    width = max(len(s.value) for s in counts) + 1
    for status, n in counts.items():
        label = f"  {status.value:<{width}}: {n}"
        console.print(status.color(label) if console.enable_color else label)
    levels = count_by_level(diagnostics)
    if levels[DiagnosticLevel.WARNING.value] or levels[DiagnosticLevel.ERROR.value]:
        console.print(
            f"  diagnostics: {levels['error']} error(s), {levels['warning']} warning(s)"
        )


def exit_for_outcome(*, changed: bool, apply_changes: bool, verbosity: int) -> None:
    """Exit with ``WOULD_CHANGE`` after a dry run that found work to do."""
    if apply_changes or not changed:
        return
    if verbosity >= 0:
        console = get_console_safely()
        console.print()
        console.print(console.styled("Dry run: re-run with --apply to write changes.", fg="yellow"))
    click.get_current_context().exit(ExitCode.WOULD_CHANGE)

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : plan.py
#   file_relpath : src/profilemark/provision/plan.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Execute a provisioning plan in a fixed order.

Steps, in order:

1. refresh the package index and upgrade installed packages;
2. install the base packages in a single invocation (they may provide the
   repository command);
3. register repositories, refresh the index once more and install the
   packages that come from those repositories;
4. run vendor installers whose program is not installed yet;
5. write static files that do not exist yet;
6. ensure the managed profile blocks;
7. ensure the directive lines (optionally gated on an installed program).

Any failing step raises and aborts the run; earlier effects are kept. Every step
is idempotent, so the whole run can simply be repeated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from profilemark.config.logging import get_logger
from profilemark.core.diagnostics import Diagnostic
from profilemark.profile.blocks import EditResult, ensure_block, ensure_line
from profilemark.profile.status import CHANGING_STATUSES, CommandStatus, LineStatus
from profilemark.provision.files import ensure_file
from profilemark.provision.system import (
    CommandRunner,
    add_repository,
    command_exists,
    install_packages,
    run_installer,
)

if TYPE_CHECKING:
    from profilemark.config.model import ProvisionPlan
    from profilemark.rendering.colored_enum import ColoredStrEnum

logger = get_logger(__name__)


class StepKind(str, Enum):
    """Kinds of provisioning steps, as shown in reports."""

    UPDATE = "update"
    UPGRADE = "upgrade"
    REPOSITORY = "repository"
    PACKAGES = "packages"
    INSTALLER = "installer"
    FILE = "file"
    BLOCK = "block"
    LINE = "line"


@dataclass(frozen=True)
class StepOutcome:
    """Result of one provisioning step.

    Attributes:
        kind (StepKind): What kind of step ran.
        name (str): Step subject (package list, installer name, path, block id...).
        status (ColoredStrEnum): Terminal status of the step.
        detail (str): Optional explanation, e.g. why a step was skipped.
        edit (EditResult | None): Profile edit for block and line steps.
    """

    kind: StepKind
    name: str
    status: ColoredStrEnum
    detail: str = ""
    edit: EditResult | None = None

    @property
    def changed(self) -> bool:
        return self.status in CHANGING_STATUSES


@dataclass
class ProvisionReport:
    """Ordered outcomes of a provisioning run plus the plan's closing notes."""

    applied: bool
    outcomes: list[StepOutcome] = field(default_factory=lambda: [])
    notes: tuple[str, ...] = ()

    def add(self, outcome: StepOutcome) -> StepOutcome:
        self.outcomes.append(outcome)
        logger.debug("%s %s: %s", outcome.kind.value, outcome.name, outcome.status.value)
        return outcome

    @property
    def changed(self) -> bool:
        """Return True if any step changed (or would change) the system."""
        return any(o.changed for o in self.outcomes)

    @property
    def edits(self) -> list[EditResult]:
        """Return the profile edits, in order."""
        return [o.edit for o in self.outcomes if o.edit is not None]

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return [d for e in self.edits for d in e.diagnostics]


def _run_packages(plan: ProvisionPlan, runner: CommandRunner, report: ProvisionReport) -> None:
    spec = plan.packages
    if spec.update_command:
        report.add(StepOutcome(StepKind.UPDATE, "package index", runner.run(spec.update_command)))
    if spec.upgrade_command:
        report.add(
            StepOutcome(StepKind.UPGRADE, "installed packages", runner.run(spec.upgrade_command))
        )
    if spec.names:
        status = install_packages(runner, spec.install_command, spec.names)
        report.add(StepOutcome(StepKind.PACKAGES, " ".join(spec.names), status))
    for repository in spec.repositories:
        status = add_repository(runner, spec.repository_command, repository)
        report.add(StepOutcome(StepKind.REPOSITORY, repository, status))
    if spec.repositories and spec.update_command:
        report.add(StepOutcome(StepKind.UPDATE, "package index", runner.run(spec.update_command)))
    if spec.repository_packages:
        names = spec.repository_packages
        status = install_packages(runner, spec.install_command, names)
        report.add(StepOutcome(StepKind.PACKAGES, " ".join(names), status))


def run_plan(
    plan: ProvisionPlan,
    *,
    apply: bool = False,
    runner: CommandRunner | None = None,
    skip_packages: bool = False,
    skip_installers: bool = False,
) -> ProvisionReport:
    """Run ``plan`` and report each step.

    Args:
        plan (ProvisionPlan): The plan to execute.
        apply (bool): Make changes. When False commands are only logged and
            profile edits are only computed.
        runner (CommandRunner | None): Command runner; defaults to one whose
            dry-run mode follows ``apply``.
        skip_packages (bool): Skip all package manager steps.
        skip_installers (bool): Skip vendor installers.

    Returns:
        ProvisionReport: Outcomes in execution order.

    Raises:
        CommandFailedError: If a collaborator command fails.
        ResourceUnreadableError: If the profile cannot be read.
        ResourceUnwritableError: If the profile or a static file cannot be written.
    """
    runner = runner if runner is not None else CommandRunner(dry_run=not apply)
    report = ProvisionReport(applied=apply, notes=plan.notes)

    if skip_packages:
        logger.info("Skipping package manager steps")
    else:
        _run_packages(plan, runner, report)

    # Programs provided by installers in this run (or planned in a dry run)
    # count as installed for gated directive lines.
    provided: set[str] = set()
    for installer in plan.installers:
        if skip_installers:
            report.add(
                StepOutcome(
                    StepKind.INSTALLER, installer.name, CommandStatus.SKIPPED, "skipped by request"
                )
            )
            continue
        status = run_installer(runner, installer.script, installer.command)
        detail = "already installed" if status == CommandStatus.SKIPPED else ""
        if status != CommandStatus.SKIPPED and installer.command:
            provided.add(installer.command)
        report.add(StepOutcome(StepKind.INSTALLER, installer.name, status, detail))

    for spec in plan.files:
        status = ensure_file(spec.target, spec.resolve_content(), apply=apply)
        report.add(StepOutcome(StepKind.FILE, str(spec.target), status))

    resource = plan.resource()
    for block in plan.blocks:
        result = ensure_block(resource, block, apply=apply)
        report.add(StepOutcome(StepKind.BLOCK, block.block_id, result.status, edit=result))

    for spec in plan.lines:
        needs = spec.when_command
        if needs and needs not in provided and not command_exists(needs):
            report.add(
                StepOutcome(
                    StepKind.LINE, spec.directive.line, LineStatus.SKIPPED, f"{needs} not installed"
                )
            )
            continue
        result = ensure_line(resource, spec.directive, apply=apply)
        report.add(StepOutcome(StepKind.LINE, spec.directive.line, result.status, edit=result))

    return report

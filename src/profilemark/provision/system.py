# profilemark:header:start
#
#   project      : ProfileMark
#   file         : system.py
#   file_relpath : src/profilemark/provision/system.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""External collaborators: package manager and vendor installer commands.

ProfileMark does not model package managers or installers. It runs configured
argument vectors and treats the exit status as a pass/fail signal: any non-zero
status raises `CommandFailedError`, which is fatal to the provisioning run. There
is no retry and no rollback; re-running is safe because every step is idempotent.

Output of the commands is not captured, so interactive prompts and progress
reach the user's terminal.
"""

from __future__ import annotations

import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from profilemark.config.logging import get_logger
from profilemark.core.errors import CommandFailedError
from profilemark.profile.status import CommandStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)

#: Per-user install locations searched in addition to ``PATH``. Vendor installers
#: drop binaries here, and the current process ``PATH`` may not include them yet.
USER_BIN_DIRS: tuple[str, ...] = ("~/.local/bin",)


def command_exists(name: str) -> bool:
    """Return True if program ``name`` is on ``PATH`` or in a per-user bin directory."""
    search = os.pathsep.join(
        [os.environ.get("PATH", os.defpath), *(os.path.expanduser(d) for d in USER_BIN_DIRS)]
    )
    found = shutil.which(name, path=search)
    logger.debug("command_exists(%r) -> %s", name, found)
    return found is not None


@dataclass
class CommandRunner:
    """Run external commands, or only record them in dry-run mode.

    Attributes:
        dry_run (bool): Log commands as "would run" instead of executing them.
        history (list[tuple[str, ...]]): Every command requested, in order.
    """

    dry_run: bool = False
    history: list[tuple[str, ...]] = field(default_factory=lambda: [])

    def run(self, argv: Sequence[str]) -> CommandStatus:
        """Run ``argv`` and wait for it.

        Returns:
            CommandStatus: ``RAN``, or ``PLANNED`` in dry-run mode.

        Raises:
            CommandFailedError: If the program is missing (status 127) or exits
                with a non-zero status.
        """
        cmd = tuple(argv)
        self.history.append(cmd)
        display = shlex.join(cmd)
        if self.dry_run:
            logger.info("Would run: %s", display)
            return CommandStatus.PLANNED

        logger.info("Running: %s", display)
        try:
            completed = subprocess.run(cmd, check=False)
        except FileNotFoundError as exc:
            logger.error("Program not found: %s", cmd[0])
            raise CommandFailedError(cmd, 127) from exc
        if completed.returncode != 0:
            logger.error("Command exited with status %d: %s", completed.returncode, display)
            raise CommandFailedError(cmd, completed.returncode)
        return CommandStatus.RAN

    def run_shell(self, script: str) -> CommandStatus:
        """Run an opaque shell command line through ``sh -c``."""
        return self.run(["sh", "-c", script])


def install_packages(
    runner: CommandRunner, install_command: Sequence[str], names: Sequence[str]
) -> CommandStatus:
    """Install ``names`` with a single package-manager invocation.

    Returns:
        CommandStatus: ``SKIPPED`` when there is nothing to install.
    """
    if not names:
        return CommandStatus.SKIPPED
    return runner.run([*install_command, *names])


def add_repository(
    runner: CommandRunner, repository_command: Sequence[str], repository: str
) -> CommandStatus:
    """Register a package repository (e.g. an Ubuntu PPA)."""
    return runner.run([*repository_command, repository])


def run_installer(runner: CommandRunner, script: str, provides: str | None) -> CommandStatus:
    """Run a vendor installer unless the program it provides is already installed.

    Args:
        runner (CommandRunner): Command runner.
        script (str): Installer command line (e.g. ``curl ... | sh``).
        provides (str | None): Program name probed with `command_exists`.

    Returns:
        CommandStatus: ``SKIPPED`` if ``provides`` is already installed.
    """
    if provides and command_exists(provides):
        logger.info("%s already appears to be installed", provides)
        return CommandStatus.SKIPPED
    return runner.run_shell(script)

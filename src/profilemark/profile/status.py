# profilemark:header:start
#
#   project      : ProfileMark
#   file         : status.py
#   file_relpath : src/profilemark/profile/status.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Status enums reported by profile and provisioning operations.

Values are human-readable strings used in CLI output; compare members with
``==`` rather than ``is``.
"""

from __future__ import annotations

from yachalk import chalk

from profilemark.rendering.colored_enum import ColoredStrEnum


class BlockStatus(ColoredStrEnum):
    """Outcome of a managed-block operation."""

    CREATED = ("block added", chalk.green_bright)
    ALREADY_PRESENT = ("already configured", chalk.green)
    REMOVED = ("block removed", chalk.yellow_bright)
    NOT_PRESENT = ("block not present", chalk.blue)
    SKIPPED = ("skipped", chalk.yellow)


class LineStatus(ColoredStrEnum):
    """Outcome of a directive-line operation."""

    APPENDED = ("line added", chalk.green_bright)
    ALREADY_PRESENT = ("already configured", chalk.green)
    SKIPPED = ("skipped", chalk.yellow)


class FileStatus(ColoredStrEnum):
    """Outcome of writing a static configuration file."""

    CREATED = ("file created", chalk.green_bright)
    ALREADY_PRESENT = ("file already exists", chalk.green)


class CommandStatus(ColoredStrEnum):
    """Outcome of an external collaborator command."""

    RAN = ("ran", chalk.green)
    PLANNED = ("would run", chalk.blue)
    SKIPPED = ("skipped", chalk.yellow)


#: Statuses that mean the profile or filesystem was (or would be) changed.
CHANGING_STATUSES: frozenset[ColoredStrEnum] = frozenset(
    {
        BlockStatus.CREATED,
        BlockStatus.REMOVED,
        LineStatus.APPENDED,
        FileStatus.CREATED,
        CommandStatus.RAN,
        CommandStatus.PLANNED,
    }
)

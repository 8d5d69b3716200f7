# profilemark:header:start
#
#   project      : ProfileMark
#   file         : errors.py
#   file_relpath : src/profilemark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Exceptions raised by the ProfileMark core.

These exceptions are framework-agnostic. The CLI translates them into
`click.ClickException` subclasses with dedicated exit codes (see
`profilemark.cli.errors`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class ProfilemarkError(Exception):
    """Base class for all ProfileMark errors."""


class ResourceError(ProfilemarkError):
    """Base class for errors accessing a profile resource on disk.

    Attributes:
        path (Path): The resource path that could not be accessed.
        reason (str): Human-readable reason.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ResourceUnreadableError(ResourceError):
    """Existing content cannot be read (permissions, decoding, I/O)."""

    def __init__(self, path: Path, reason: str, *, decode_error: bool = False) -> None:
        super().__init__(path, reason)
        self.decode_error = decode_error


class ResourceUnwritableError(ResourceError):
    """The resource (or its directory) cannot be written."""

    def __init__(self, path: Path, reason: str, *, permission_denied: bool = False) -> None:
        super().__init__(path, reason)
        self.permission_denied = permission_denied


class InvalidBlockError(ProfilemarkError, ValueError):
    """A managed block definition violates its marker or body constraints."""


class InvalidDirectiveError(ProfilemarkError, ValueError):
    """A directive line definition is empty, multi-line, or has a bad pattern."""


class ConfigError(ProfilemarkError):
    """The provisioning plan is missing, malformed, or has wrong value types."""


class CommandFailedError(ProfilemarkError):
    """An external collaborator command exited with a non-zero status.

    Attributes:
        command (tuple[str, ...]): The argument vector that was run.
        returncode (int): The process exit status (127 when the program is missing).
    """

    def __init__(self, command: Sequence[str], returncode: int) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        super().__init__(f"Command failed with exit status {returncode}: {' '.join(command)}")

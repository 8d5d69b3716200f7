# profilemark:header:start
#
#   project      : ProfileMark
#   file         : errors.py
#   file_relpath : src/profilemark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Exceptions for the ProfileMark CLI.

Every CLI error is a `click.ClickException` carrying an `ExitCode`. Core
exceptions (`profilemark.core.errors`) are mapped onto them by
`translate_errors`, which commands wrap around their work.

Styling:
    Errors print through the project console when one is on the Click context
    (see `ProfilemarkCliError.show`), and fall back to Click's default otherwise.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from profilemark.config.logging import get_logger
from profilemark.core.errors import (
    CommandFailedError,
    ConfigError,
    InvalidBlockError,
    InvalidDirectiveError,
    ResourceUnreadableError,
    ResourceUnwritableError,
)
from profilemark.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)


class ProfilemarkCliError(click.ClickException):
    """Base class for all ProfileMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain message; color is applied in `show`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class ProfilemarkUsageError(ProfilemarkCliError):
    """Invalid flags or arguments, including invalid block or directive definitions."""

    exit_code = ExitCode.USAGE_ERROR


class ProfilemarkConfigError(ProfilemarkCliError):
    """Missing, invalid or malformed plan."""

    exit_code = ExitCode.CONFIG_ERROR


class ProfilemarkFileNotFoundError(ProfilemarkCliError):
    """An input file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ProfilemarkPermissionDeniedError(ProfilemarkCliError):
    """Insufficient permissions to read or write the profile."""

    exit_code = ExitCode.PERMISSION_DENIED


class ProfilemarkIOError(ProfilemarkCliError):
    """I/O error reading or writing the profile."""

    exit_code = ExitCode.IO_ERROR


class ProfilemarkEncodingError(ProfilemarkCliError):
    """The profile could not be decoded."""

    exit_code = ExitCode.ENCODING_ERROR


class ProfilemarkCommandFailedError(ProfilemarkCliError):
    """A package manager or vendor installer command failed."""

    exit_code = ExitCode.COMMAND_FAILED


@contextmanager
def translate_errors() -> Iterator[None]:
    """Re-raise core exceptions as CLI errors with dedicated exit codes."""
    try:
        yield
    except ConfigError as exc:
        raise ProfilemarkConfigError(str(exc)) from exc
    except (InvalidBlockError, InvalidDirectiveError) as exc:
        raise ProfilemarkUsageError(str(exc)) from exc
    except ResourceUnreadableError as exc:
        logger.debug("Unreadable resource: %s", exc)
        if exc.decode_error:
            raise ProfilemarkEncodingError(f"Resource unreadable: {exc}") from exc
        if isinstance(exc.__cause__, PermissionError):
            raise ProfilemarkPermissionDeniedError(f"Resource unreadable: {exc}") from exc
        raise ProfilemarkIOError(f"Resource unreadable: {exc}") from exc
    except ResourceUnwritableError as exc:
        logger.debug("Unwritable resource: %s", exc)
        if exc.permission_denied:
            raise ProfilemarkPermissionDeniedError(f"Resource unwritable: {exc}") from exc
        raise ProfilemarkIOError(f"Resource unwritable: {exc}") from exc
    except CommandFailedError as exc:
        raise ProfilemarkCommandFailedError(str(exc)) from exc

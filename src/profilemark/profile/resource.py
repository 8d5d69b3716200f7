# profilemark:header:start
#
#   project      : ProfileMark
#   file         : resource.py
#   file_relpath : src/profilemark/profile/resource.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Profile resource: an explicit, path-backed text file.

A `ProfileResource` stands for a user's shell startup file (``~/.bashrc`` by
default). Operations never reach for a global profile path; callers pass a
resource, which lets tests point at temporary files.

Reading:
    The file is decoded as UTF-8 with ``newline=""`` so existing line endings
    survive untouched. A missing file reads as empty content.

Writing:
    `ProfileResource.write_text` is atomic. The new content goes to a temporary
    file in the same directory, is flushed and fsynced, and then replaces the
    original via `os.replace`. The original file mode is preserved. A crash
    mid-write leaves either the old or the new file, never a torn one.

    A symlinked profile (as managed by dotfile tools) is written through: the
    link is resolved and its target is replaced, so the link itself survives.
    An existing profile the user may not write raises `ResourceUnwritableError`
    even when its directory would allow the rename.

Lines:
    Only ``\n`` ends a line (with an optional preceding ``\r``). Other Unicode
    line boundaries such as form feed or U+2028 are ordinary characters, so a
    marker that contains one is still found again on the next run.
"""

from __future__ import annotations

import contextlib
import errno
import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path

from profilemark.config.logging import get_logger
from profilemark.core.errors import ResourceUnreadableError, ResourceUnwritableError

logger = get_logger(__name__)

DEFAULT_PROFILE_PATH: str = "~/.bashrc"


def split_lines(text: str) -> list[str]:
    """Split ``text`` after each ``\\n``, keeping line terminators.

    Unlike `str.splitlines`, no other character ends a line.
    """
    if not text:
        return []
    parts = text.split("\n")
    lines = [f"{part}\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def detect_newline(text: str) -> str:
    """Return the newline style of the first line ending in ``text``.

    Args:
        text (str): Content read with universal newlines disabled.

    Returns:
        str: ``"\\r\\n"`` if the first line ends with CRLF, else ``"\\n"``.
    """
    idx = text.find("\n")
    if idx > 0 and text[idx - 1] == "\r":
        return "\r\n"
    return "\n"


@dataclass(frozen=True)
class ProfileResource:
    """A shell profile file addressed by an explicit path.

    Attributes:
        path (Path): Location of the profile. ``~`` is expanded on construction
            via `ProfileResource.at`.
        encoding (str): Text encoding used for reads and writes.
    """

    path: Path
    encoding: str = "utf-8"

    @classmethod
    def at(cls, path: str | Path | None = None, *, encoding: str = "utf-8") -> ProfileResource:
        """Build a resource for ``path``, defaulting to ``~/.bashrc``.

        Args:
            path (str | Path | None): Profile path; ``~`` is expanded.
            encoding (str): Text encoding for the file.

        Returns:
            ProfileResource: The resource.
        """
        raw = Path(path) if path is not None else Path(DEFAULT_PROFILE_PATH)
        return cls(path=raw.expanduser(), encoding=encoding)

    def exists(self) -> bool:
        """Return True if the profile file exists."""
        return self.path.is_file()

    def read_text(self) -> str:
        """Return the full profile content, or ``""`` if the file does not exist.

        Raises:
            ResourceUnreadableError: If the file exists but cannot be read or decoded.
        """
        try:
            with self.path.open("r", encoding=self.encoding, newline="") as fh:
                text = fh.read()
        except FileNotFoundError:
            logger.debug("Profile %s does not exist yet; reading as empty", self.path)
            return ""
        except UnicodeDecodeError as exc:
            raise ResourceUnreadableError(
                self.path, f"cannot decode as {self.encoding}: {exc.reason}", decode_error=True
            ) from exc
        except IsADirectoryError as exc:
            raise ResourceUnreadableError(self.path, "is a directory") from exc
        except OSError as exc:
            raise ResourceUnreadableError(self.path, exc.strerror or str(exc)) from exc
        logger.trace("Read %d characters from %s", len(text), self.path)
        return text

    def read_lines(self) -> list[str]:
        """Return the profile lines without their line terminators."""
        return [line.rstrip("\r\n") for line in split_lines(self.read_text())]

    def create_empty(self) -> bool:
        """Create the profile as an empty file if it does not exist.

        Returns:
            bool: True if the file was created.

        Raises:
            ResourceUnwritableError: If the file cannot be created.
        """
        if self.path.exists():
            return False
        target = self.path.resolve()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.touch(exist_ok=True)
        except OSError as exc:
            raise _unwritable(self.path, exc) from exc
        logger.info("Created empty profile %s", self.path)
        return True

    def write_text(self, text: str) -> int:
        """Atomically replace the profile content with ``text``.

        Args:
            text (str): New content, written verbatim (no newline translation).

        Returns:
            int: Number of encoded bytes written.

        Raises:
            ResourceUnwritableError: If the directory or file cannot be written, or
                the existing file is not writable by the current user.
        """
        data = text.encode(self.encoding)
        target = self.path.resolve()
        directory = target.parent
        if target.exists() and not os.access(target, os.W_OK):
            raise ResourceUnwritableError(
                self.path, "file is not writable", permission_denied=True
            )
        try:
            directory.mkdir(parents=True, exist_ok=True)
            mode = stat.S_IMODE(target.stat().st_mode) if target.exists() else None
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=directory
            )
        except OSError as exc:
            raise _unwritable(self.path, exc) from exc

        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            if mode is not None:
                os.chmod(tmp_name, mode)
            os.replace(tmp_name, target)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise _unwritable(self.path, exc) from exc

        logger.debug("Wrote %d bytes to %s", len(data), target)
        return len(data)


def _unwritable(path: Path, exc: OSError) -> ResourceUnwritableError:
    denied = isinstance(exc, PermissionError) or exc.errno in (errno.EACCES, errno.EPERM)
    return ResourceUnwritableError(path, exc.strerror or str(exc), permission_denied=denied)

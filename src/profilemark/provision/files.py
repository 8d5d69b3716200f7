# profilemark:header:start
#
#   project      : ProfileMark
#   file         : files.py
#   file_relpath : src/profilemark/provision/files.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Static configuration files written once if absent."""

from __future__ import annotations

from typing import TYPE_CHECKING

from profilemark.config.logging import get_logger
from profilemark.profile.resource import ProfileResource
from profilemark.profile.status import FileStatus

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


def ensure_file(path: Path, content: str, *, apply: bool = True) -> FileStatus:
    """Write ``content`` to ``path`` unless the file already exists.

    Existing files are never inspected or overwritten; their content is the
    user's. Missing parent directories are created.

    Raises:
        ResourceUnwritableError: If the file or its directory cannot be written.
    """
    if path.exists():
        logger.info("Configuration file already exists at %s", path)
        return FileStatus.ALREADY_PRESENT
    if apply:
        ProfileResource(path).write_text(content)
        logger.info("Created %s", path)
    return FileStatus.CREATED

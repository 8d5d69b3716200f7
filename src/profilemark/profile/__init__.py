# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/profile/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Shell-profile block management.

Public surface:

- `ProfileResource`: explicit, path-backed profile with atomic writes.
- `ManagedBlock`, `DirectiveLine`: what should be present.
- `ensure_block`, `ensure_line`, `remove_block`, `find_block`: the operations.
- `EditResult`, `BlockSpan`, `BlockStatus`, `LineStatus`: what they report.
"""

from __future__ import annotations

from profilemark.profile.blocks import (
    BlockSpan,
    DirectiveLine,
    EditResult,
    ManagedBlock,
    ensure_block,
    ensure_line,
    find_block,
    remove_block,
)
from profilemark.profile.resource import DEFAULT_PROFILE_PATH, ProfileResource
from profilemark.profile.status import BlockStatus, LineStatus

__all__ = [
    "DEFAULT_PROFILE_PATH",
    "BlockSpan",
    "BlockStatus",
    "DirectiveLine",
    "EditResult",
    "LineStatus",
    "ManagedBlock",
    "ProfileResource",
    "ensure_block",
    "ensure_line",
    "find_block",
    "remove_block",
]

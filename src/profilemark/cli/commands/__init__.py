# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark CLI subcommands."""

from __future__ import annotations

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Click-based command-line interface for ProfileMark."""

from __future__ import annotations

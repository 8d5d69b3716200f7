# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Core, UI-agnostic primitives shared across ProfileMark.

Included modules:

- ``diagnostics``
  Diagnostic types attached to profile edits (marker collisions and similar
  conditions that do not change an operation's outcome).

- ``errors``
  Framework-agnostic exceptions raised by the profile, config and provision layers.

- ``exit_codes``
  Centralized CLI exit codes, aligned with BSD-style ``sysexits`` where
  practical, with a dedicated ``WOULD_CHANGE`` code for dry-run mode.
"""

from __future__ import annotations

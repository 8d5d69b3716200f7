# profilemark:header:start
#
#   project      : ProfileMark
#   file         : constants.py
#   file_relpath : src/profilemark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PROFILEMARK_VERSION: str = get_version("profilemark")

# Name of the bundled default plan inside the package `profilemark.config`:
DEFAULT_PLAN_PACKAGE: str = "profilemark.config"
DEFAULT_PLAN_NAME: str = "profilemark-default.toml"

# Directory (inside `profilemark.config`) holding static files referenced by plans:
PLAN_RESOURCES_DIR: str = "resources"

# Line closing the license header of bundled TOML files:
PROFILEMARK_END_MARKER: str = "profilemark:header:end"

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Configuration handling for ProfileMark.

This package holds the logging setup, the canonical TOML keys, the tomlkit-based
plan I/O and the provisioning plan model. The annotated default plan
``profilemark-default.toml`` and the static files it references are bundled here.
"""

from __future__ import annotations

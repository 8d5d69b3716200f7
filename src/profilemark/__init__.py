# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __init__.py
#   file_relpath : src/profilemark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark package.

ProfileMark provisions a desktop Linux shell environment. Its core keeps
marker-delimited configuration blocks and single directive lines present exactly
once in a user's shell profile, without disturbing any other content. A TOML plan
drives the surrounding provisioning flow (system packages, vendor installers,
static configuration files) through a Click CLI.
"""

from __future__ import annotations

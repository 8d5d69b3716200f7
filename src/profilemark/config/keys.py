# profilemark:header:start
#
#   project      : ProfileMark
#   file         : keys.py
#   file_relpath : src/profilemark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Canonical TOML section and key names for ProfileMark plans.

Keys defined here are the external plan schema. The ordering of constants
mirrors ``profilemark-default.toml``. Renaming or removing a key is a breaking
change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ProfileMark plans."""

    # Root
    KEY_PROFILE: Final[str] = "profile"
    KEY_NOTES: Final[str] = "notes"

    # [packages]
    SECTION_PACKAGES: Final[str] = "packages"

    KEY_UPDATE_COMMAND: Final[str] = "update_command"
    KEY_UPGRADE_COMMAND: Final[str] = "upgrade_command"
    KEY_INSTALL_COMMAND: Final[str] = "install_command"
    KEY_REPOSITORY_COMMAND: Final[str] = "repository_command"
    KEY_REPOSITORIES: Final[str] = "repositories"
    KEY_NAMES: Final[str] = "names"
    KEY_REPOSITORY_PACKAGES: Final[str] = "repository_packages"

    # [[installers]]
    SECTION_INSTALLERS: Final[str] = "installers"

    KEY_NAME: Final[str] = "name"
    KEY_COMMAND: Final[str] = "command"
    KEY_SCRIPT: Final[str] = "script"

    # [[files]]
    SECTION_FILES: Final[str] = "files"

    KEY_PATH: Final[str] = "path"
    KEY_CONTENT: Final[str] = "content"
    KEY_RESOURCE: Final[str] = "resource"

    # [[blocks]]
    SECTION_BLOCKS: Final[str] = "blocks"

    KEY_ID: Final[str] = "id"
    KEY_START: Final[str] = "start"
    KEY_END: Final[str] = "end"
    KEY_BODY: Final[str] = "body"

    # [[lines]]
    SECTION_LINES: Final[str] = "lines"

    KEY_PATTERN: Final[str] = "pattern"
    KEY_LINE: Final[str] = "line"
    KEY_REGEX: Final[str] = "regex"
    KEY_WHEN_COMMAND: Final[str] = "when_command"

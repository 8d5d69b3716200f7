# profilemark:header:start
#
#   project      : ProfileMark
#   file         : __main__.py
#   file_relpath : src/profilemark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Module entry point for running ProfileMark via ``python -m profilemark``.

Delegates to :func:`profilemark.cli.main.cli`, the single authoritative CLI entry
point regardless of how ProfileMark is launched.

Examples:
    Preview the default provisioning plan::

        python -m profilemark provision --skip-packages
"""

from __future__ import annotations

from profilemark.cli.main import cli

if __name__ == "__main__":
    cli()

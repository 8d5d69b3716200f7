# profilemark:header:start
#
#   project      : ProfileMark
#   file         : diff.py
#   file_relpath : src/profilemark/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Unified diff generation and colorized rendering for profile previews.

`make_patch` compares the current and the updated profile content. The CLI shows
the result with `render_patch` when ``--diff`` is passed.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from profilemark.config.logging import get_logger

logger = get_logger(__name__)


def make_patch(before: str, after: str, label: str) -> list[str]:
    """Return a unified diff of ``before`` → ``after`` as a list of lines.

    Lines keep their original terminators; no CRLF conversion takes place.

    Args:
        before (str): Current content.
        after (str): Updated content.
        label (str): File label used in the ``---``/``+++`` headers.

    Returns:
        list[str]: Diff lines, empty when the contents are identical.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=f"{label} (current)",
            tofile=f"{label} (updated)",
            n=3,
        )
    )
    logger.trace("Patch for %s has %d lines", label, len(patch_lines))
    return patch_lines


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as either a sequence of lines or a single multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)

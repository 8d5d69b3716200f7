# profilemark:header:start
#
#   project      : ProfileMark
#   file         : diagnostics.py
#   file_relpath : src/profilemark/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Diagnostic primitives attached to profile edits.

Diagnostics report conditions that do not change the outcome of an operation,
such as a marker string that also appears in unrelated profile content.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk

from profilemark.config.logging import get_logger

logger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic with a severity level and message."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics gathered while processing one resource.

    Every diagnostic added is also logged, WARNING and ERROR entries at
    ``logging.WARNING`` so they surface even when the console is quiet.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        if diagnostic.level == DiagnosticLevel.INFO:
            logger.info("%s", diagnostic.message)
        else:
            logger.warning("%s", diagnostic.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.INFO, message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def has_warning(self) -> bool:
        """Return True if the log contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def freeze(self) -> tuple[Diagnostic, ...]:
        """Return an immutable snapshot of the collected diagnostics."""
        return tuple(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def count_by_level(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a mapping of diagnostic counts keyed by level value.

    Args:
        diagnostics (Iterable[Diagnostic]): Diagnostics to count.

    Returns:
        dict[str, int]: Keys ``"info"``, ``"warning"`` and ``"error"``.
    """
    counts: dict[str, int] = {level.value: 0 for level in DiagnosticLevel}
    for d in diagnostics:
        counts[d.level.value] += 1
    return counts

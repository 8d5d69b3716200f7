# profilemark:header:start
#
#   project      : ProfileMark
#   file         : blocks.py
#   file_relpath : src/profilemark/profile/blocks.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Idempotent management of marker-delimited blocks and directive lines.

This module is the heart of ProfileMark. It keeps a declared block of
configuration present in a profile exactly once, and makes single directive lines
present without disturbing unrelated content.

Contract:
    * `ensure_block` looks for a line exactly equal to the block's start marker.
      If it is found, the block counts as installed and nothing is touched: the
      existing body is **never** compared with or refreshed from the desired one.
      Otherwise a blank separator line, the start marker, the body and the end
      marker are appended in one atomic write.
    * `ensure_line` appends a directive unless some existing line already
      contains its pattern (substring, or regex search when ``regex=True``),
      which tolerates equivalent lines written by other installers.
    * `remove_block` deletes an installed block so that a stale body can be
      refreshed by ensuring it again.
    * Content outside the markers is never modified, reordered or removed. New
      lines are only ever appended, using the file's own newline style.

Every call is a fresh read-modify-write cycle; the file content is the only state.
With ``apply=False`` the would-be content is computed and returned but nothing is
written, not even an empty file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from profilemark.config.logging import get_logger
from profilemark.core.diagnostics import Diagnostic, DiagnosticLog
from profilemark.core.errors import InvalidBlockError, InvalidDirectiveError
from profilemark.profile.resource import ProfileResource, detect_newline, split_lines
from profilemark.profile.status import BlockStatus, LineStatus
from profilemark.utils.diff import make_patch

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def _is_single_line(text: str) -> bool:
    return "\n" not in text and "\r" not in text


def _bare(line: str) -> str:
    """Return ``line`` without its line terminator."""
    return line.rstrip("\r\n")


@dataclass(frozen=True)
class ManagedBlock:
    """A named region of a profile delimited by unique marker lines.

    Attributes:
        block_id (str): Identifier used in messages and plans.
        start_marker (str): Literal line opening the block. It must not collide
            with naturally occurring content (by convention a comment unique to
            the tool). Its presence alone identifies an installed block.
        end_marker (str): Literal line closing the block.
        body (tuple[str, ...]): Lines between the markers, treated as opaque text.

    Raises:
        InvalidBlockError: If a marker is empty or multi-line, both markers are
            equal, or a body line is multi-line or equals a marker.
    """

    block_id: str
    start_marker: str
    end_marker: str
    body: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))
        for name, marker in (("start", self.start_marker), ("end", self.end_marker)):
            if not marker.strip():
                raise InvalidBlockError(f"Block {self.block_id!r}: {name} marker is empty")
            if not _is_single_line(marker):
                raise InvalidBlockError(
                    f"Block {self.block_id!r}: {name} marker must be a single line"
                )
        if self.start_marker == self.end_marker:
            raise InvalidBlockError(
                f"Block {self.block_id!r}: start and end markers must differ"
            )
        for lineno, line in enumerate(self.body, start=1):
            if not _is_single_line(line):
                raise InvalidBlockError(
                    f"Block {self.block_id!r}: body line {lineno} contains a line break"
                )
            if line in (self.start_marker, self.end_marker):
                raise InvalidBlockError(
                    f"Block {self.block_id!r}: body line {lineno} repeats a marker"
                )

    @classmethod
    def from_text(
        cls, block_id: str, start_marker: str, end_marker: str, body: str
    ) -> ManagedBlock:
        """Build a block from a multi-line body string.

        A single trailing newline in ``body`` is ignored, so a body read from a
        file or a TOML multi-line string yields the lines one expects.
        """
        body_lines = tuple(_bare(line) for line in split_lines(body))
        return cls(block_id, start_marker, end_marker, body_lines)

    def rendered_lines(self) -> list[str]:
        """Return the lines appended for this block, separator line included."""
        return ["", self.start_marker, *self.body, self.end_marker]


@dataclass(frozen=True)
class DirectiveLine:
    """A single line that must exist somewhere in a profile.

    Attributes:
        pattern (str): Substring (or regular expression when ``regex`` is set)
            that detects an existing equivalent line.
        line (str): The literal line appended when no line matches.
        regex (bool): Interpret ``pattern`` as a regular expression (``re.search``).

    Raises:
        InvalidDirectiveError: If ``line`` is empty or multi-line, or ``pattern``
            is empty or does not compile.
    """

    pattern: str
    line: str
    regex: bool = False
    _compiled: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.line.strip() or not _is_single_line(self.line):
            raise InvalidDirectiveError(
                f"Directive line must be a single non-empty line: {self.line!r}"
            )
        if not self.pattern:
            raise InvalidDirectiveError(f"Directive {self.line!r}: pattern is empty")
        if self.regex:
            try:
                object.__setattr__(self, "_compiled", re.compile(self.pattern))
            except re.error as exc:
                raise InvalidDirectiveError(
                    f"Directive {self.line!r}: invalid pattern {self.pattern!r}: {exc}"
                ) from exc

    def matches(self, line: str) -> bool:
        """Return True if ``line`` is equivalent to this directive.

        A line equal to the directive itself always matches, so a pattern that
        does not cover its own line cannot cause repeated appends.
        """
        bare = _bare(line)
        if bare == self.line:
            return True
        if self._compiled is not None:
            return self._compiled.search(bare) is not None
        return self.pattern in bare


@dataclass(frozen=True)
class BlockSpan:
    """Location of an installed block, as 0-based line indexes.

    Attributes:
        start (int): Index of the start marker line.
        end (int | None): Index of the first end marker after ``start``, or None
            if the block is not terminated.
        body (tuple[str, ...]): Lines between the markers (up to end of file
            when unterminated).
    """

    start: int
    end: int | None
    body: tuple[str, ...]


@dataclass(frozen=True)
class EditResult:
    """Outcome of a profile operation.

    Attributes:
        resource (ProfileResource): The profile that was inspected.
        status (BlockStatus | LineStatus): Terminal status of the operation.
        before (str): Content read at the start of the operation.
        after (str): Resulting (or, in dry-run mode, would-be) content.
        written (bool): True if ``after`` was persisted to disk.
        diagnostics (tuple[Diagnostic, ...]): Warnings such as marker collisions.
    """

    resource: ProfileResource
    status: BlockStatus | LineStatus
    before: str
    after: str
    written: bool = False
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def changed(self) -> bool:
        """Return True if the operation changes (or would change) the profile."""
        return self.before != self.after

    def diff(self) -> list[str]:
        """Return a unified diff between ``before`` and ``after``."""
        return make_patch(self.before, self.after, str(self.resource.path))


def _append(text: str, new_lines: Sequence[str]) -> str:
    """Return ``text`` with ``new_lines`` appended in the file's newline style."""
    nl = detect_newline(text)
    if text and not text.endswith("\n"):
        text += nl
    return text + "".join(f"{line}{nl}" for line in new_lines)


def _inspect_markers(
    lines: Sequence[str], block: ManagedBlock, log: DiagnosticLog, where: str
) -> None:
    """Record heuristic marker-collision diagnostics for ``block`` in ``lines``."""
    bare = [_bare(line) for line in lines]
    starts = [i for i, line in enumerate(bare) if line == block.start_marker]
    ends = [i for i, line in enumerate(bare) if line == block.end_marker]

    if len(starts) > 1:
        log.add_warning(
            f"{where}: start marker of block {block.block_id!r} occurs {len(starts)} times "
            f"(lines {', '.join(str(i + 1) for i in starts)})"
        )
    if starts and not any(e > starts[0] for e in ends):
        log.add_warning(
            f"{where}: block {block.block_id!r} starts on line {starts[0] + 1} "
            "but has no end marker"
        )
    if ends and not starts:
        log.add_warning(
            f"{where}: end marker of block {block.block_id!r} found on line {ends[0] + 1} "
            "without a start marker"
        )
    for i, line in enumerate(bare):
        if line in (block.start_marker, block.end_marker):
            continue
        if block.start_marker in line or block.end_marker in line:
            log.add_warning(
                f"{where}: line {i + 1} contains marker text of block {block.block_id!r} "
                "in unrelated content"
            )


def _locate(lines: Sequence[str], block: ManagedBlock) -> BlockSpan | None:
    bare = [_bare(line) for line in lines]
    try:
        start = bare.index(block.start_marker)
    except ValueError:
        return None
    end: int | None = None
    for i in range(start + 1, len(bare)):
        if bare[i] == block.end_marker:
            end = i
            break
    stop = end if end is not None else len(bare)
    return BlockSpan(start=start, end=end, body=tuple(bare[start + 1 : stop]))


def find_block(resource: ProfileResource, block: ManagedBlock) -> BlockSpan | None:
    """Return the span of ``block`` in ``resource``, or None if it is not installed.

    Raises:
        ResourceUnreadableError: If the profile cannot be read.
    """
    return _locate(split_lines(resource.read_text()), block)


def ensure_block(
    resource: ProfileResource, block: ManagedBlock, *, apply: bool = True
) -> EditResult:
    """Make ``block`` present in ``resource`` exactly once.

    Args:
        resource (ProfileResource): The profile to edit.
        block (ManagedBlock): The desired block.
        apply (bool): Persist the change; when False only compute it.

    Returns:
        EditResult: ``BlockStatus.CREATED`` if the block was (or would be)
        appended, ``BlockStatus.ALREADY_PRESENT`` if its start marker exists.

    Raises:
        ResourceUnreadableError: If existing content cannot be read.
        ResourceUnwritableError: If the profile cannot be created or written.
    """
    if apply:
        resource.create_empty()
    text = resource.read_text()
    lines = split_lines(text)
    log = DiagnosticLog()
    _inspect_markers(lines, block, log, str(resource.path))

    if _locate(lines, block) is not None:
        logger.info("Block %r already present in %s", block.block_id, resource.path)
        return EditResult(
            resource, BlockStatus.ALREADY_PRESENT, text, text, diagnostics=log.freeze()
        )

    updated = _append(text, block.rendered_lines())
    if apply:
        resource.write_text(updated)
        logger.info("Appended block %r to %s", block.block_id, resource.path)
    return EditResult(
        resource, BlockStatus.CREATED, text, updated, written=apply, diagnostics=log.freeze()
    )


def ensure_line(
    resource: ProfileResource, directive: DirectiveLine, *, apply: bool = True
) -> EditResult:
    """Make ``directive`` present in ``resource`` at most once.

    Args:
        resource (ProfileResource): The profile to edit.
        directive (DirectiveLine): The directive and its tolerant match pattern.
        apply (bool): Persist the change; when False only compute it.

    Returns:
        EditResult: ``LineStatus.APPENDED`` if the line was (or would be)
        appended, ``LineStatus.ALREADY_PRESENT`` if an equivalent line exists.

    Raises:
        ResourceUnreadableError: If existing content cannot be read.
        ResourceUnwritableError: If the profile cannot be created or written.
    """
    if apply:
        resource.create_empty()
    text = resource.read_text()
    log = DiagnosticLog()

    for lineno, line in enumerate(split_lines(text), start=1):
        if directive.matches(line):
            log.add_info(
                f"{resource.path}: line {lineno} already matches {directive.pattern!r}"
            )
            return EditResult(
                resource, LineStatus.ALREADY_PRESENT, text, text, diagnostics=log.freeze()
            )

    updated = _append(text, [directive.line])
    if apply:
        resource.write_text(updated)
        logger.info("Appended %r to %s", directive.line, resource.path)
    return EditResult(
        resource, LineStatus.APPENDED, text, updated, written=apply, diagnostics=log.freeze()
    )


def remove_block(
    resource: ProfileResource, block: ManagedBlock, *, apply: bool = True
) -> EditResult:
    """Remove an installed ``block`` from ``resource``.

    The start marker, the body, the end marker and the blank separator line
    directly before the start marker are removed. Nothing else is touched.

    Args:
        resource (ProfileResource): The profile to edit.
        block (ManagedBlock): The block to remove; only its markers matter.
        apply (bool): Persist the change; when False only compute it.

    Returns:
        EditResult: ``BlockStatus.REMOVED``, ``BlockStatus.NOT_PRESENT`` when the
        start marker is absent, or ``BlockStatus.SKIPPED`` (with an error
        diagnostic) when the block has no end marker.

    Raises:
        ResourceUnreadableError: If existing content cannot be read.
        ResourceUnwritableError: If the profile cannot be written.
    """
    text = resource.read_text()
    lines = split_lines(text)
    log = DiagnosticLog()
    _inspect_markers(lines, block, log, str(resource.path))

    span = _locate(lines, block)
    if span is None:
        return EditResult(resource, BlockStatus.NOT_PRESENT, text, text, diagnostics=log.freeze())
    if span.end is None:
        log.add_error(
            f"{resource.path}: refusing to remove block {block.block_id!r} "
            "without an end marker"
        )
        return EditResult(resource, BlockStatus.SKIPPED, text, text, diagnostics=log.freeze())

    first = span.start
    if first > 0 and _bare(lines[first - 1]) == "":
        first -= 1
    updated = "".join(lines[:first] + lines[span.end + 1 :])
    if apply:
        resource.write_text(updated)
        logger.info("Removed block %r from %s", block.block_id, resource.path)
    return EditResult(
        resource, BlockStatus.REMOVED, text, updated, written=apply, diagnostics=log.freeze()
    )

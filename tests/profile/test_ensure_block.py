# profilemark:header:start
#
#   project      : ProfileMark
#   file         : test_ensure_block.py
#   file_relpath : tests/profile/test_ensure_block.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Tests for `ensure_block`: creation, presence detection and marker diagnostics."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from profilemark.core.diagnostics import DiagnosticLevel
from profilemark.core.errors import (
    InvalidBlockError,
    ResourceUnreadableError,
    ResourceUnwritableError,
)
from profilemark.profile import BlockStatus, ManagedBlock, ProfileResource, ensure_block
from tests.conftest import read_raw, write_raw

if TYPE_CHECKING:
    from pathlib import Path

BLOCK_A = ManagedBlock("BLOCK_A", "# START_A", "# END_A", ("export X=1",))

SCENARIO_1 = "\n# START_A\nexport X=1\n# END_A\n"


def test_scenario_empty_resource_gets_block(resource: ProfileResource) -> None:
    """An empty profile ends up with a blank line, the markers and the body."""
    write_raw(resource.path, "")

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.CREATED
    assert result.written
    assert read_raw(resource.path) == SCENARIO_1
    assert read_raw(resource.path).splitlines() == ["", "# START_A", "export X=1", "# END_A"]


def test_scenario_rerun_is_byte_identical(resource: ProfileResource) -> None:
    """Re-running with the same block leaves the file byte-identical."""
    ensure_block(resource, BLOCK_A)
    first = resource.path.read_bytes()

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.ALREADY_PRESENT
    assert not result.written
    assert not result.changed
    assert resource.path.read_bytes() == first


def test_missing_profile_is_created(resource: ProfileResource) -> None:
    assert not resource.exists()

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.CREATED
    assert read_raw(resource.path) == SCENARIO_1


def test_existing_content_is_kept_as_prefix(resource: ProfileResource) -> None:
    original = "# my profile\nalias ll='ls -l'\n"
    write_raw(resource.path, original)

    ensure_block(resource, BLOCK_A)

    assert read_raw(resource.path) == original + SCENARIO_1


def test_missing_final_newline_is_added_before_block(resource: ProfileResource) -> None:
    write_raw(resource.path, "alias ll='ls -l'")

    ensure_block(resource, BLOCK_A)

    assert read_raw(resource.path) == "alias ll='ls -l'\n" + SCENARIO_1


def test_crlf_profile_keeps_crlf(resource: ProfileResource) -> None:
    write_raw(resource.path, "alias a=b\r\n")

    ensure_block(resource, BLOCK_A)

    assert read_raw(resource.path) == "alias a=b\r\n\r\n# START_A\r\nexport X=1\r\n# END_A\r\n"


def test_stale_body_is_never_refreshed(resource: ProfileResource) -> None:
    """Presence is decided by the start marker alone; a different body is ignored."""
    ensure_block(resource, BLOCK_A)
    before = read_raw(resource.path)
    updated = ManagedBlock("BLOCK_A", "# START_A", "# END_A", ("export X=2", "export Y=3"))

    result = ensure_block(resource, updated)

    assert result.status == BlockStatus.ALREADY_PRESENT
    assert read_raw(resource.path) == before


def test_indented_marker_does_not_count(resource: ProfileResource) -> None:
    """Only a line exactly equal to the start marker identifies the block."""
    write_raw(resource.path, "  # START_A\n")

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.CREATED
    assert any(d.level == DiagnosticLevel.WARNING for d in result.diagnostics)


def test_dry_run_writes_nothing(resource: ProfileResource) -> None:
    result = ensure_block(resource, BLOCK_A, apply=False)

    assert result.status == BlockStatus.CREATED
    assert not result.written
    assert result.after == SCENARIO_1
    assert not resource.path.exists()
    assert any(line.startswith("+# START_A") for line in result.diff())


def test_start_without_end_counts_as_present_with_warning(resource: ProfileResource) -> None:
    write_raw(resource.path, "# START_A\nexport X=1\n")

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.ALREADY_PRESENT
    assert read_raw(resource.path) == "# START_A\nexport X=1\n"
    messages = [d.message for d in result.diagnostics]
    assert any("no end marker" in m for m in messages)


def test_duplicate_start_markers_warn(resource: ProfileResource) -> None:
    write_raw(resource.path, "# START_A\n# END_A\n# START_A\n# END_A\n")

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.ALREADY_PRESENT
    assert any("occurs 2 times" in d.message for d in result.diagnostics)


def test_marker_text_in_unrelated_line_warns(resource: ProfileResource) -> None:
    write_raw(resource.path, "echo '# START_A'\n")

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.CREATED
    assert any("unrelated content" in d.message for d in result.diagnostics)


def test_two_blocks_coexist(resource: ProfileResource) -> None:
    block_b = ManagedBlock("BLOCK_B", "# START_B", "# END_B", ("alias b=c",))

    ensure_block(resource, BLOCK_A)
    ensure_block(resource, block_b)
    ensure_block(resource, BLOCK_A)

    assert read_raw(resource.path) == SCENARIO_1 + "\n# START_B\nalias b=c\n# END_B\n"


def test_empty_body_block(resource: ProfileResource) -> None:
    ensure_block(resource, ManagedBlock("E", "# >>> e", "# <<< e"))

    assert read_raw(resource.path) == "\n# >>> e\n# <<< e\n"


def test_undecodable_profile_is_unreadable(resource: ProfileResource) -> None:
    resource.path.parent.mkdir(parents=True)
    resource.path.write_bytes(b"\xff\xfe\xfa not utf-8\n")

    with pytest.raises(ResourceUnreadableError) as excinfo:
        ensure_block(resource, BLOCK_A)

    assert excinfo.value.decode_error
    assert resource.path.read_bytes() == b"\xff\xfe\xfa not utf-8\n"


def test_directory_in_place_of_profile_is_unreadable(tmp_path: Path) -> None:
    target = tmp_path / "dir-profile"
    target.mkdir()

    with pytest.raises(ResourceUnreadableError):
        ensure_block(ProfileResource.at(target), BLOCK_A)


@pytest.mark.parametrize(
    ("start", "end", "body"),
    [
        ("", "# END", ()),
        ("# START", "   ", ()),
        ("# SAME", "# SAME", ()),
        ("# START\n# more", "# END", ()),
        ("# START", "# END", ("line\nbreak",)),
        ("# START", "# END", ("# END",)),
    ],
)
def test_invalid_block_definitions_are_rejected(
    start: str, end: str, body: tuple[str, ...]
) -> None:
    with pytest.raises(InvalidBlockError):
        ManagedBlock("bad", start, end, body)


def test_from_text_ignores_single_trailing_newline() -> None:
    block = ManagedBlock.from_text("x", "# s", "# e", "a\nb\n")

    assert block.body == ("a", "b")


def test_symlinked_profile_is_written_through(tmp_path: Path) -> None:
    """A profile managed by a dotfile tool keeps its link; the target gets the block."""
    target = tmp_path / "dotfiles" / "bashrc"
    write_raw(target, "alias foo=bar\n")
    link = tmp_path / "home" / ".bashrc"
    link.symlink_to(target)

    result = ensure_block(ProfileResource.at(link), BLOCK_A)

    assert result.status == BlockStatus.CREATED
    assert link.is_symlink()
    assert read_raw(target) == "alias foo=bar\n" + SCENARIO_1
    assert sorted(p.name for p in target.parent.iterdir()) == ["bashrc"]
    assert ensure_block(ProfileResource.at(link), BLOCK_A).status == BlockStatus.ALREADY_PRESENT


def test_dangling_symlink_creates_its_target(tmp_path: Path) -> None:
    target = tmp_path / "dotfiles" / "bashrc"
    target.parent.mkdir()
    link = tmp_path / "home" / ".bashrc"
    link.symlink_to(target)

    ensure_block(ProfileResource.at(link), BLOCK_A)

    assert link.is_symlink()
    assert read_raw(target) == SCENARIO_1


@pytest.mark.skipif(os.geteuid() == 0, reason="root may write read-only files")
def test_read_only_profile_is_unwritable(resource: ProfileResource) -> None:
    write_raw(resource.path, "keep\n")
    resource.path.chmod(0o444)
    try:
        with pytest.raises(ResourceUnwritableError) as excinfo:
            ensure_block(resource, BLOCK_A)
    finally:
        resource.path.chmod(0o644)

    assert excinfo.value.permission_denied
    assert read_raw(resource.path) == "keep\n"


@pytest.mark.usefixtures("write_access_denied")
def test_profile_without_write_access_is_unwritable(resource: ProfileResource) -> None:
    write_raw(resource.path, "keep\n")

    with pytest.raises(ResourceUnwritableError) as excinfo:
        ensure_block(resource, BLOCK_A)

    assert excinfo.value.permission_denied
    assert excinfo.value.path == resource.path
    assert read_raw(resource.path) == "keep\n"


@pytest.mark.usefixtures("write_access_denied")
def test_dry_run_on_read_only_profile_does_not_raise(resource: ProfileResource) -> None:
    write_raw(resource.path, "keep\n")

    result = ensure_block(resource, BLOCK_A, apply=False)

    assert result.status == BlockStatus.CREATED
    assert not result.written


@pytest.mark.parametrize("boundary", ["\x0c", "\x0b", "\x1c", "\x85", "\u2028", "\u2029"])
def test_unicode_line_boundaries_inside_markers_stay_idempotent(
    resource: ProfileResource, boundary: str
) -> None:
    block = ManagedBlock("odd", f"# START{boundary}A", "# END_A", (f"x{boundary}y",))

    first = ensure_block(resource, block)
    second = ensure_block(resource, block)

    assert first.status == BlockStatus.CREATED
    assert second.status == BlockStatus.ALREADY_PRESENT
    assert read_raw(resource.path) == f"\n# START{boundary}A\nx{boundary}y\n# END_A\n"


def test_line_with_form_feed_before_marker_text_is_not_the_marker(
    resource: ProfileResource,
) -> None:
    write_raw(resource.path, "x\x0c# START_A\n")

    result = ensure_block(resource, BLOCK_A)

    assert result.status == BlockStatus.CREATED
    assert read_raw(resource.path) == "x\x0c# START_A\n" + SCENARIO_1


def test_from_text_splits_only_on_newlines() -> None:
    block = ManagedBlock.from_text("x", "# s", "# e", "a\x0cb\r\nc\u2028d\n")

    assert block.body == ("a\x0cb", "c\u2028d")

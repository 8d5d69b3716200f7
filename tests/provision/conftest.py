# profilemark:header:start
#
#   project      : ProfileMark
#   file         : conftest.py
#   file_relpath : tests/provision/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Fixtures that keep provisioning tests away from real commands."""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Any

import pytest

from profilemark.provision import system

if TYPE_CHECKING:
    from collections.abc import Sequence


class RecordedRun:
    """Stand-in for `subprocess.run` that records argument vectors.

    Attributes:
        calls (list[tuple[str, ...]]): Commands in call order.
        fail_on (dict[str, int]): Exit status to return for commands whose joined
            text contains the key.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.fail_on: dict[str, int] = {}

    def __call__(self, args: Sequence[str], **_kwargs: Any) -> subprocess.CompletedProcess[bytes]:
        cmd = tuple(args)
        self.calls.append(cmd)
        joined = " ".join(cmd)
        code = next((rc for key, rc in self.fail_on.items() if key in joined), 0)
        return subprocess.CompletedProcess(cmd, code)


@pytest.fixture
def recorded_run(monkeypatch: pytest.MonkeyPatch) -> RecordedRun:
    """Replace `subprocess.run` inside the command runner."""
    recorder = RecordedRun()
    monkeypatch.setattr(system.subprocess, "run", recorder)
    return recorder


@pytest.fixture
def installed(monkeypatch: pytest.MonkeyPatch) -> set[str]:
    """Control which programs `command_exists` reports as installed."""
    programs: set[str] = set()

    def fake_which(name: str, path: str | None = None) -> str | None:
        return f"/usr/bin/{name}" if name in programs else None

    monkeypatch.setattr(system.shutil, "which", fake_which)
    return programs

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Pytest configuration for the ProfileMark test suite.

Sets up logging at TRACE for test runs, keeps the developer's environment from
forcing a log level, and points ``HOME`` at a temporary directory so that no
test can touch the real ``~/.bashrc`` or ``~/.config``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from profilemark.config import logging
from profilemark.profile import ProfileResource

if TYPE_CHECKING:
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: pytest.MarkDecorator = pytest.mark.cli


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_profilemark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via the environment during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV, raising=False)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HOME`` at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def profile_path(tmp_path: Path) -> Path:
    """Return the path of a (not yet existing) profile in a temporary directory."""
    return tmp_path / "profile" / ".bashrc"


@pytest.fixture
def resource(profile_path: Path) -> ProfileResource:
    return ProfileResource.at(profile_path)


@pytest.fixture
def write_access_denied(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every existing profile look read-only, even to root."""
    monkeypatch.setattr("profilemark.profile.resource.os.access", lambda *_a, **_k: False)


def read_raw(path: Path) -> str:
    """Read ``path`` without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def write_raw(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` without newline translation."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level for all tests so failures carry full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end


"""ProfileMark project automation via Nox.

Sessions:
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `lint`: Ruff lint checks.
  - `format_check`: Verify formatting with Ruff.
  - `format`: Apply formatting with Ruff.

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import sys
import warnings
from typing import Any

import nox

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

DEV_INSTALL: tuple[str, ...] = ("-e", ".[test,dev]")


def _parse_pyproject_toml() -> dict[str, Any]:
    """Parse `pyproject.toml` with the stdlib parser (Python 3.11+).

    This runs at **noxfile import time**, so it must not depend on project
    runtime dependencies. On older interpreters an empty mapping is returned.
    """
    if sys.version_info < (3, 11):
        return {}
    import tomllib

    path = pathlib.Path(__file__).parent / "pyproject.toml"
    if not path.exists():
        return {}
    return tomllib.loads(path.read_text(encoding="utf-8"))


def get_supported_pythons() -> list[str]:
    """Resolve supported Python versions from `pyproject.toml` classifiers.

    Returns:
        list[str]: Supported versions like ["3.10", "3.11", ...], sorted.
    """
    classifiers = _parse_pyproject_toml().get("project", {}).get("classifiers", [])
    found = {c.removeprefix("Programming Language :: Python :: ") for c in classifiers}
    versions = sorted(
        {v for v in found if v.startswith("3.")},
        key=lambda v: tuple(int(p) for p in v.split(".")),
    )
    if not versions:
        warnings.warn(
            f"No Python classifiers found; falling back to Python {CURRENT_PYTHON_VERSION}.",
            RuntimeWarning,
            stacklevel=2,
        )
        return [CURRENT_PYTHON_VERSION]
    return versions


PYTHONS: list[str] = get_supported_pythons()


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite (without slow property tests) and pyright."""
    session.install(*DEV_INSTALL)
    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", str(session.python or CURRENT_PYTHON_VERSION))


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property-based tests."""
    session.install(*DEV_INSTALL)
    session.run("pytest", "-vv", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Run Ruff lint checks."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting without changing files."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Apply Ruff formatting."""
    session.install(*DEV_INSTALL)
    session.run("ruff", "format", ".")

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : options.py
#   file_relpath : src/profilemark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, profile, plan,
apply/diff) and their resolution logic, so commands and the group stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from profilemark.cli.errors import ProfilemarkUsageError

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int: ``-1`` when quiet, ``0`` by default, otherwise the ``-v`` count
        capped at 2.

    Raises:
        ProfilemarkUsageError: If both ``-v`` and ``-q`` are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ProfilemarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors and the final outcome.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Honors ``--color``/``--no-color`` first, then ``FORCE_COLOR`` and ``NO_COLOR``,
    and finally enables color when stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (same as --color=never).",
    )(f)
    return f


def common_profile_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--profile`` option naming the shell profile to edit."""
    return click.option(
        "--profile",
        "profile_path",
        metavar="FILE",
        type=click.Path(dir_okay=False),
        default=None,
        help="Shell profile to edit (default: the plan's profile, ~/.bashrc).",
    )(f)


def common_plan_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the ``--config`` option naming a provisioning plan."""
    return click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(exists=True, dir_okay=False, readable=True),
        default=None,
        help="Provisioning plan (TOML). Defaults to the bundled plan.",
    )(f)


def common_apply_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--apply`` and ``--diff``."""
    f = click.option(
        "--apply", "apply_changes", is_flag=True, help="Write changes (off by default)."
    )(f)
    f = click.option("--diff", is_flag=True, help="Show unified diffs of profile changes.")(f)
    return f

# profilemark:header:start
#
#   project      : ProfileMark
#   file         : main.py
#   file_relpath : src/profilemark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark command-line interface.

Group-level options (verbosity and color) are resolved once and stored in
``ctx.obj`` together with the program-output console; subcommands read them
from there. Internal logging is configured from ``PROFILEMARK_LOG_LEVEL``.
"""

from __future__ import annotations

import click

from profilemark.cli.commands.block import block_command
from profilemark.cli.commands.dump_config import dump_config_command
from profilemark.cli.commands.init_config import init_config_command
from profilemark.cli.commands.line import line_command
from profilemark.cli.commands.provision import provision_command
from profilemark.cli.commands.status import status_command
from profilemark.cli.commands.strip import strip_command
from profilemark.cli.commands.version import version_command
from profilemark.cli.console import ClickConsole, ConsoleLike
from profilemark.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from profilemark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)
    logger.debug("Verbosity level: %d", ctx.obj["verbosity_level"])

    effective_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ProfileMark: idempotent shell-profile blocks and workstation provisioning.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ProfileMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'profilemark provision' to preview the default plan.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(init_config_command)
cli.add_command(dump_config_command)
cli.add_command(block_command)
cli.add_command(line_command)
cli.add_command(strip_command)
cli.add_command(status_command)
cli.add_command(provision_command)

if __name__ == "__main__":
    cli()

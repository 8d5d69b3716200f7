# profilemark:header:start
#
#   project      : ProfileMark
#   file         : init_config.py
#   file_relpath : src/profilemark/cli/commands/init_config.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``init-config`` command.

Prints the bundled default provisioning plan as annotated TOML, as a starting
point for a custom plan passed with ``--config``.
"""

from __future__ import annotations

import click

from profilemark.cli.console import get_console_safely
from profilemark.cli.errors import translate_errors
from profilemark.cli.utils import get_effective_verbosity
from profilemark.config.io import load_default_plan_text


@click.command(
    name="init-config",
    help="Display the default provisioning plan (TOML).",
)
def init_config_command() -> None:
    """Print a starter plan to stdout."""
    ctx = click.get_current_context()
    console = get_console_safely()
    vlevel = get_effective_verbosity(ctx)

    with translate_errors():
        text = load_default_plan_text()

    if vlevel > 0:
        console.print(console.styled("Default ProfileMark plan (TOML):", bold=True, underline=True))
        console.print(console.styled("# === BEGIN ===", fg="cyan", dim=True))
    console.print(console.styled(text.rstrip("\n"), fg="cyan"))
    if vlevel > 0:
        console.print(console.styled("# === END ===", fg="cyan", dim=True))

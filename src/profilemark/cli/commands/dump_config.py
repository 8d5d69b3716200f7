# profilemark:header:start
#
#   project      : ProfileMark
#   file         : dump_config.py
#   file_relpath : src/profilemark/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 The ProfileMark Authors
#
# profilemark:header:end

"""ProfileMark ``dump-config`` command.

Emits the effective plan as TOML after loading ``--config`` (or the bundled
default) and applying ``--profile``. The output is wrapped between
``# === BEGIN ===`` and ``# === END ===`` markers for easy parsing.
"""

from __future__ import annotations

import click

from profilemark.cli.console import get_console_safely
from profilemark.cli.errors import translate_errors
from profilemark.cli.options import CONTEXT_SETTINGS, common_plan_options, common_profile_options
from profilemark.cli.utils import load_plan_for
from profilemark.config.io import to_toml
from profilemark.config.logging import get_logger

logger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the effective provisioning plan as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_plan_options
@common_profile_options
def dump_config_command(*, config_path: str | None, profile_path: str | None) -> None:
    """Print the resolved plan between BEGIN/END markers."""
    console = get_console_safely()
    with translate_errors():
        plan = load_plan_for(config_path, profile_path)
        text = to_toml(plan.to_toml_dict())
    logger.trace("Effective plan: %s", plan)

    console.print("# === BEGIN ===")
    console.print(console.styled(text.rstrip("\n"), fg="cyan"))
    console.print("# === END ===")

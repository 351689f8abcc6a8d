# topmark:header:start
#
#   project      : Au
#   file         : main.py
#   file_relpath : src/aulang/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for Au: a default action plus real subcommands.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Running ``au`` without a command behaves like ``au build``.
- Subcommands reuse the helpers in `aulang.cli.cmd_common` for consistent
  input handling and exit codes.
"""

from __future__ import annotations

from pathlib import Path

import click

from aulang.cli.commands.build import build_command
from aulang.cli.commands.check import check_command
from aulang.cli.commands.tr import tr_command
from aulang.cli.commands.version import version_command
from aulang.cli.console import ClickConsole
from aulang.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from aulang.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    directory: Path,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (directory, verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        directory (Path): Project directory holding the lexicon and documents.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["directory"] = directory

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,  # Always invoke the cli() function
    help="Au: translate documents written for a constructed language.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Project directory containing the lexicon and documents.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    directory: Path,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Au CLI."""
    init_common_state(
        ctx,
        directory=directory,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        logger.debug("no command given, running build")
        ctx.invoke(build_command)


cli.add_command(build_command)

cli.add_command(tr_command)

cli.add_command(check_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()

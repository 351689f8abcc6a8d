# topmark:header:start
#
#   project      : Au
#   file         : version.py
#   file_relpath : src/aulang/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au `version` command.

Prints the current Au version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from aulang.cli.cmd_common import get_console, get_effective_verbosity
from aulang.constants import AU_VERSION


@click.command(
    name="version",
    help="Show the current version of Au.",
)
def version_command() -> None:
    """Show the current version of Au."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Au version:", bold=True, underline=True))
        console.print(f"    {console.styled(AU_VERSION, bold=True)}")
    else:
        console.print(console.styled(AU_VERSION, bold=True))

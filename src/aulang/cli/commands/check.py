# topmark:header:start
#
#   project      : Au
#   file         : check.py
#   file_relpath : src/aulang/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au `check` command.

Parses the lexicon and every source document without translating or writing
anything. Exits with `ExitCode.DATA_ERROR` on the first input that fails to
parse.
"""

from __future__ import annotations

import click

from aulang.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    get_project_directory,
    load_documents,
    load_lexicon,
    load_project_config,
)


@click.command(
    name="check",
    help="Validate the lexicon and documents without writing anything.",
)
def check_command() -> None:
    """Validate the lexicon and documents without writing anything."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    directory = get_project_directory(ctx)
    config = load_project_config(directory)
    lexicon_path = config.lexicon_path(directory)
    lexicon = load_lexicon(lexicon_path)
    documents = load_documents(config.document_paths(directory))

    if vlevel > 0:
        console.print(f"{lexicon_path.name}: {len(lexicon.lexemes)} lexeme(s)")
        for path, text in documents:
            console.print(f"{path.name}: {len(text)} segment(s)")
    if vlevel >= 0:
        console.print(console.styled("ok", fg="green"))

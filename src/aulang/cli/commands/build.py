# topmark:header:start
#
#   project      : Au
#   file         : build.py
#   file_relpath : src/aulang/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au `build` command (also the default when no command is given).

Reads the lexicon and every source document in the project directory,
translates the marked glosses, and writes each result next to its source with
the document extension removed (``story.txt.au`` becomes ``story.txt``).

All inputs are parsed before anything is written: one bad row or gloss
aborts the whole build and leaves existing output files untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from aulang.cli.cmd_common import (
    get_console,
    get_effective_verbosity,
    get_project_directory,
    load_documents,
    load_lexicon,
    load_project_config,
    write_output,
)
from aulang.config.logging import get_logger
from aulang.lexicon import index_lexicon
from aulang.text import to_string
from aulang.translator import Translator

if TYPE_CHECKING:
    from aulang.config.logging import AuLogger

logger: AuLogger = get_logger(__name__)


@click.command(
    name="build",
    help="Translate every document in the project directory.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Parse and translate, but do not write any output file.",
)
def build_command(*, dry_run: bool = False) -> None:
    """Translate every document in the project directory.

    Args:
        dry_run (bool): If True, report what would be written without writing.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    directory = get_project_directory(ctx)
    config = load_project_config(directory)
    lexicon = load_lexicon(config.lexicon_path(directory))
    documents = load_documents(config.document_paths(directory))

    translate = Translator(index_lexicon(lexicon))
    outputs = [(config.output_path(path), to_string(translate, text)) for path, text in documents]

    for target, content in outputs:
        if not dry_run:
            write_output(target, content)
        if vlevel > 0:
            verb = "would write" if dry_run else "wrote"
            console.print(f"{verb} {target.name}")

    if vlevel >= 0:
        noun = "document" if len(outputs) == 1 else "documents"
        console.print(
            console.styled(
                f"{'Checked' if dry_run else 'Translated'} {len(outputs)} {noun}.", fg="green"
            )
        )

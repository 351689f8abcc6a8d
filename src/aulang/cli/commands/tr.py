# topmark:header:start
#
#   project      : Au
#   file         : tr.py
#   file_relpath : src/aulang/cli/commands/tr.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au `tr` command.

Translates glosses given as arguments (read with implicit pointers, like
document glosses) and prints the word forms separated by single spaces.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from aulang.cli.cmd_common import (
    get_console,
    get_project_directory,
    load_lexicon,
    load_project_config,
)
from aulang.cli.errors import AuDataError
from aulang.gloss import GlossMode, parse_gloss
from aulang.lexicon import index_lexicon
from aulang.result import collect, recover
from aulang.translator import Translator

if TYPE_CHECKING:
    from aulang.result import Failure


def _fail(result: Failure) -> NoReturn:
    raise AuDataError(result.detail)


@click.command(
    name="tr",
    help="Translate glosses given on the command line.",
)
@click.argument("glosses", nargs=-1, required=True)
def tr_command(*, glosses: tuple[str, ...]) -> None:
    """Translate glosses given on the command line.

    Args:
        glosses (tuple[str, ...]): Gloss tokens, e.g. ``bear#PL``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    directory = get_project_directory(ctx)
    config = load_project_config(directory)
    translate = Translator(index_lexicon(load_lexicon(config.lexicon_path(directory))))

    parsed = recover(
        collect(parse_gloss(GlossMode.IMPLICIT_POINTERS, g) for g in glosses), _fail
    )
    console.print(" ".join(translate(gloss) for gloss in parsed))

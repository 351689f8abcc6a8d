# topmark:header:start
#
#   project      : Au
#   file         : cmd_common.py
#   file_relpath : src/aulang/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers read project inputs and convert parse failures into CLI errors
with the right exit codes. Parsers themselves stay free of I/O; everything
that touches the filesystem happens here.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, NoReturn

import click

from aulang.cli.errors import AuConfigError, AuDataError, AuFileNotFoundError, AuIOError
from aulang.config import load_config
from aulang.config.logging import get_logger
from aulang.lexicon import parse_lexicon
from aulang.result import recover
from aulang.text import parse_text

if TYPE_CHECKING:
    from pathlib import Path

    from aulang.cli.console import ConsoleLike
    from aulang.config import Config
    from aulang.config.logging import AuLogger
    from aulang.lexicon import Lexicon
    from aulang.result import Failure
    from aulang.text import Text

logger: AuLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the root group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` positive, ``-q`` negative)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_project_directory(ctx: click.Context) -> Path:
    """Return the project directory selected with ``-C`` (default: CWD)."""
    return ctx.obj["directory"]


def load_project_config(directory: Path) -> Config:
    """Load ``au.toml`` from ``directory``.

    Raises:
        AuConfigError: If the file is unreadable or invalid.
    """

    def _fail(result: Failure) -> NoReturn:
        raise AuConfigError(result.detail)

    return recover(load_config(directory), _fail)


def read_input(path: Path) -> str:
    """Read a UTF-8 input file, keeping its line endings.

    Args:
        path (Path): File to read.

    Returns:
        str: The file content.

    Raises:
        AuFileNotFoundError: If the file does not exist.
        AuDataError: If the file is not valid UTF-8.
        AuIOError: For any other read error.
    """
    logger.debug("reading %s", path)
    try:
        with path.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except FileNotFoundError as exc:
        raise AuFileNotFoundError(f"{path.name}: file not found") from exc
    except UnicodeDecodeError as exc:
        raise AuDataError(f"{path.name}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise AuIOError(f"{path.name}: {exc.strerror or exc}") from exc


def write_output(path: Path, content: str) -> None:
    """Write a UTF-8 output file, preserving line endings verbatim.

    Raises:
        AuIOError: If the file cannot be written.
    """
    logger.debug("writing %s", path)
    try:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    except OSError as exc:
        raise AuIOError(f"{path.name}: {exc.strerror or exc}") from exc


def _data_error(path: Path) -> Callable[[Failure], NoReturn]:
    def _fail(result: Failure) -> NoReturn:
        raise AuDataError(f"{path.name}: {result.detail}")

    return _fail


def load_lexicon(path: Path) -> Lexicon:
    """Read and parse the lexicon table at ``path``.

    Raises:
        AuDataError: If the lexicon does not parse; the message is prefixed
            with the file name.
    """
    return recover(parse_lexicon(read_input(path)), _data_error(path))


def load_documents(paths: list[Path]) -> list[tuple[Path, Text]]:
    """Read and parse every document, failing on the first bad one.

    Raises:
        AuDataError: If a document does not parse; the message is prefixed
            with the file name.
    """
    return [(path, recover(parse_text(read_input(path)), _data_error(path))) for path in paths]

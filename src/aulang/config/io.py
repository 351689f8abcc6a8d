# topmark:header:start
#
#   project      : Au
#   file         : io.py
#   file_relpath : src/aulang/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load the optional ``au.toml`` project file.

Parsing is done with `tomlkit`; only the ``[au]`` table is read::

    [au]
    lexicon = "lexicon.csv"
    extension = ".au"

A missing file means defaults. Unknown keys are logged and ignored; malformed
TOML and ill-typed values are reported as failures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from aulang.config.logging import get_logger
from aulang.config.model import Config
from aulang.constants import CONFIG_FILENAME, CONFIG_SECTION
from aulang.result import failure, success

if TYPE_CHECKING:
    from pathlib import Path

    from aulang.config.logging import AuLogger
    from aulang.result import Result

logger: AuLogger = get_logger(__name__)

KEY_LEXICON: Final[str] = "lexicon"
KEY_EXTENSION: Final[str] = "extension"


def load_config(directory: Path) -> Result[Config]:
    """Load ``au.toml`` from ``directory``.

    Args:
        directory (Path): The project directory.

    Returns:
        Result[Config]: The configuration (defaults when the file is absent),
            or a failure if the file cannot be read or is invalid.
    """
    path: Path = directory / CONFIG_FILENAME
    if not path.is_file():
        logger.debug("no %s in %s, using defaults", CONFIG_FILENAME, directory)
        return success(Config())
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        return failure(f"cannot read {CONFIG_FILENAME}: {exc}")
    return parse_config(text)


def parse_config(text: str) -> Result[Config]:
    """Parse ``au.toml`` content.

    Args:
        text (str): TOML document text.

    Returns:
        Result[Config]: The configuration, or a failure describing the problem.
    """
    try:
        data_any: Any = tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        return failure(f"malformed {CONFIG_FILENAME}: {exc}")

    section: Any = data_any.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        return failure(f"{CONFIG_FILENAME}: [{CONFIG_SECTION}] must be a table")

    for key in section:
        if key not in (KEY_LEXICON, KEY_EXTENSION):
            logger.warning("%s: ignoring unknown key %r", CONFIG_FILENAME, key)

    values: dict[str, str] = {}
    for key in (KEY_LEXICON, KEY_EXTENSION):
        if key not in section:
            continue
        value: Any = section[key]
        if not isinstance(value, str) or not value:
            return failure(f"{CONFIG_FILENAME}: {key} must be a non-empty string")
        values[key] = value

    extension: str | None = values.get(KEY_EXTENSION)
    if extension is not None and (not extension.startswith(".") or extension == "."):
        return failure(f"{CONFIG_FILENAME}: extension must look like '.au', got {extension!r}")

    config = Config(**values)
    logger.debug("resolved config %r", config)
    return success(config)

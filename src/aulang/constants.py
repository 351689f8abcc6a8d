# topmark:header:start
#
#   project      : Au
#   file         : constants.py
#   file_relpath : src/aulang/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

AU_VERSION: str = get_version("aulang")

# Project files looked up in the working directory:
CONFIG_FILENAME: str = "au.toml"
CONFIG_SECTION: str = "au"
DEFAULT_LEXICON_FILENAME: str = "lexicon.csv"
DEFAULT_DOCUMENT_EXTENSION: str = ".au"

LOG_LEVEL_ENV: str = "AU_LOG_LEVEL"

# Reserved lexicon columns, in the order they are reported when missing.
ID_COLUMN: str = "id"
TRANSLATION_COLUMN: str = "translation"
GENERATOR_COLUMN: str = "generator"

# Delimiter pair around a marked zone in a document.
GLOSS_MARKER: str = "__"

# topmark:header:start
#
#   project      : Au
#   file         : model.py
#   file_relpath : src/aulang/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from aulang.constants import DEFAULT_DOCUMENT_EXTENSION, DEFAULT_LEXICON_FILENAME

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Project settings resolved from ``au.toml`` (or defaults).

    Attributes:
        lexicon (str): Lexicon table filename, relative to the project directory.
        extension (str): Suffix of source documents; the translated output is
            written next to each document with this suffix removed.
    """

    lexicon: str = DEFAULT_LEXICON_FILENAME
    extension: str = DEFAULT_DOCUMENT_EXTENSION

    def lexicon_path(self, directory: Path) -> Path:
        """Return the lexicon path inside ``directory``."""
        return directory / self.lexicon

    def document_paths(self, directory: Path) -> list[Path]:
        """Return the source documents in ``directory``, sorted by name."""
        return sorted(
            p
            for p in directory.iterdir()
            if p.is_file() and p.name.endswith(self.extension) and p.name != self.extension
        )

    def output_path(self, document: Path) -> Path:
        """Return where the translation of ``document`` is written."""
        return document.with_name(document.name[: -len(self.extension)])

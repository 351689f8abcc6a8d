# topmark:header:start
#
#   project      : Au
#   file         : translator.py
#   file_relpath : src/aulang/translator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gloss-to-word translation through a lexicon index.

The translator resolves pointer glosses against a
[`LexiconIndex`][aulang.lexicon.LexiconIndex]. A lexeme's translation may
itself point at another lexeme, so resolution is recursive. Grammatical
features are handed to an inflection hook; without one, word forms are
returned uninflected.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from aulang.config.logging import get_logger
from aulang.gloss import Gloss, LiteralStem

if TYPE_CHECKING:
    from collections.abc import Sequence

    from aulang.config.logging import AuLogger
    from aulang.lexicon import LexiconIndex

logger: AuLogger = get_logger(__name__)

TranslateFn = Callable[[Gloss], str]
InflectFn = Callable[[str, "Sequence[str]"], str]

UNRESOLVED_PREFIX: str = "?"


def no_inflection(word: str, features: Sequence[str]) -> str:  # pylint: disable=unused-argument
    """Return ``word`` unchanged."""
    return word


class Translator:
    """Callable turning glosses into target-language word forms.

    Args:
        index (LexiconIndex): Lexeme id to translation.
        inflect (InflectFn | None): Applies grammatical features to a word
            form. Defaults to [`no_inflection`][aulang.translator.no_inflection].

    Unknown lexeme ids and circular references are rendered as ``?<id>`` and
    logged as warnings; translation itself never fails.
    """

    def __init__(self, index: LexiconIndex, inflect: InflectFn | None = None) -> None:
        self.index: LexiconIndex = index
        self.inflect: InflectFn = inflect or no_inflection

    def __call__(self, gloss: Gloss) -> str:
        """Translate a single gloss."""
        return self._translate(gloss, frozenset())

    def _translate(self, gloss: Gloss, visiting: frozenset[str]) -> str:
        stem = gloss.stem
        if isinstance(stem, LiteralStem):
            word = stem.text
        else:
            word = self._resolve(stem.lexeme_id, visiting)
        if not gloss.features:
            return word
        return self.inflect(word, gloss.features)

    def _resolve(self, lexeme_id: str, visiting: frozenset[str]) -> str:
        if lexeme_id in visiting:
            logger.warning("circular lexicon reference through %r", lexeme_id)
            return f"{UNRESOLVED_PREFIX}{lexeme_id}"
        translation: Gloss | None = self.index.get(lexeme_id)
        if translation is None:
            logger.warning("no lexicon entry for %r", lexeme_id)
            return f"{UNRESOLVED_PREFIX}{lexeme_id}"
        return self._translate(translation, visiting | {lexeme_id})

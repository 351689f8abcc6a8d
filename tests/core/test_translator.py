# topmark:header:start
#
#   project      : Au
#   file         : test_translator.py
#   file_relpath : tests/core/test_translator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for gloss translation through a lexicon index."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aulang.gloss import Gloss, LiteralStem, PointerStem, literal
from aulang.lexicon import index_lexicon, parse_lexicon
from aulang.result import Success, map_result, success
from aulang.text import parse_text, to_string
from aulang.translator import Translator, no_inflection
from tests.conftest import trim_margin

if TYPE_CHECKING:
    from collections.abc import Sequence

    import pytest

    from aulang.lexicon import LexiconIndex


def pointer(lexeme_id: str, *features: str) -> Gloss:
    """Shorthand for a pointer gloss."""
    return Gloss(PointerStem(lexeme_id), features)


def suffixing(word: str, features: Sequence[str]) -> str:
    """Toy inflection: append each feature in lower case."""
    return word + "".join(f"-{feature.lower()}" for feature in features)


INDEX: LexiconIndex = {
    "bear": literal("bär"),
    "bears": pointer("bear", "PL"),
    "ursine": pointer("bear"),
    "loop": pointer("loop"),
    "ping": pointer("pong"),
    "pong": pointer("ping"),
}


def test_literal_glosses_are_returned_as_written() -> None:
    """Literal stems skip the lexicon."""
    assert Translator(INDEX)(literal("Rome")) == "Rome"


def test_pointer_resolves_through_the_index() -> None:
    """A pointer yields the translation of the lexeme it names."""
    assert Translator(INDEX)(pointer("bear")) == "bär"


def test_pointer_chains_are_followed() -> None:
    """A translation that is itself a pointer is resolved recursively."""
    assert Translator(INDEX)(pointer("ursine")) == "bär"


def test_features_are_ignored_without_inflection() -> None:
    """The default hook leaves word forms alone."""
    assert Translator(INDEX)(pointer("bear", "PL")) == "bär"
    assert no_inflection("bär", ["PL"]) == "bär"


def test_features_go_through_the_inflection_hook() -> None:
    """Features of the gloss and of chained translations are both applied."""
    translate = Translator(INDEX, inflect=suffixing)
    assert translate(pointer("bear", "PL")) == "bär-pl"
    assert translate(pointer("bears", "ERG")) == "bär-pl-erg"
    assert translate(Gloss(LiteralStem("Rome"), ("LOC",))) == "Rome-loc"


def test_unknown_id_renders_a_placeholder(caplog: pytest.LogCaptureFixture) -> None:
    """Missing entries become ``?<id>`` and are logged."""
    with caplog.at_level(logging.WARNING):
        assert Translator(INDEX)(pointer("wolf")) == "?wolf"
    assert "no lexicon entry for 'wolf'" in caplog.text


def test_self_reference_terminates(caplog: pytest.LogCaptureFixture) -> None:
    """A lexeme pointing at itself is cut off instead of recursing forever."""
    with caplog.at_level(logging.WARNING):
        assert Translator(INDEX)(pointer("loop")) == "?loop"
    assert "circular lexicon reference through 'loop'" in caplog.text


def test_mutual_reference_terminates() -> None:
    """A longer cycle is cut off at the first repeated id."""
    assert Translator(INDEX)(pointer("ping")) == "?ping"


def test_translating_a_document_end_to_end() -> None:
    """Lexicon, document and translator together produce the rendered text."""
    raw_lexicon = trim_margin(
        """
        id,translation,generator
        bear,bär,noun
        bears,[bear]#PL,
        """
    )
    lexicon = parse_lexicon(raw_lexicon)
    assert isinstance(lexicon, Success)
    translate = Translator(index_lexicon(lexicon.value), inflect=suffixing)

    rendered = map_result(
        parse_text("the word for bears is __bears__, or __bear#PL__; not __^Bär__."),
        lambda text: to_string(translate, text),
    )
    assert rendered == success("the word for bears is __bär-pl__, or __bär-pl__; not __Bär__.")

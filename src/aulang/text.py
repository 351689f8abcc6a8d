# topmark:header:start
#
#   project      : Au
#   file         : text.py
#   file_relpath : src/aulang/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Annotated document tokenizer and renderer.

A document is plain text with *marked zones* delimited by ``__``::

    the word for bears is __bear#PL__!

Scanning happens in two independent levels:

1. [`split_markers`][aulang.text.split_markers] splits the document on
   ``__`` and tells which pieces lie inside a marked zone. The markers and
   everything outside the zones are literal text.
2. [`split_words`][aulang.text.split_words] splits the inside of a zone on
   runs of punctuation and whitespace. Each non-empty word is a gloss; the
   runs between words stay literal.

[`parse_text`][aulang.text.parse_text] combines both into a
[`Text`][aulang.text.Text], and [`to_string`][aulang.text.to_string] renders it
back. Rendering with a function that serializes each gloss reproduces the
original document exactly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Union

from aulang.config.logging import get_logger
from aulang.constants import GLOSS_MARKER
from aulang.gloss import Gloss, GlossMode, parse_gloss
from aulang.result import collect, map_result, success

if TYPE_CHECKING:
    from collections.abc import Iterator

    from aulang.config.logging import AuLogger
    from aulang.result import Result
    from aulang.translator import TranslateFn

logger: AuLogger = get_logger(__name__)

_RE_MARKER: Final[re.Pattern[str]] = re.compile(f"({re.escape(GLOSS_MARKER)})")

# Characters that separate glosses inside a marked zone.
WORD_BREAK_CHARS: Final[str] = "~`!@$%&()={}\\|;:'\",<.>/? \t\n\r"
_RE_WORD_BREAK: Final[re.Pattern[str]] = re.compile(f"([{re.escape(WORD_BREAK_CHARS)}]+)")


@dataclass(frozen=True)
class LiteralSegment:
    """Document text rendered verbatim."""

    string: str


@dataclass(frozen=True)
class TranslatableSegment:
    """A gloss rendered through a translation function."""

    gloss: Gloss


Segment = Union[LiteralSegment, TranslatableSegment]
Text = list[Segment]


def split_markers(raw: str) -> Iterator[tuple[str, bool]]:
    """Split a document on ``__`` markers.

    The split keeps the markers, so pieces alternate: outside text, marker,
    inside text, marker, outside text, and so on. A piece lies inside a marked
    zone iff its index is 2 modulo 4. An unmatched final marker therefore
    leaves the rest of the document inside a zone.

    Args:
        raw (str): The document text.

    Yields:
        tuple[str, bool]: Each piece with ``True`` if it is inside a zone.
    """
    for i, piece in enumerate(_RE_MARKER.split(raw)):
        yield piece, i % 4 == 2


def split_words(zone: str) -> Iterator[tuple[str, bool]]:
    """Split the inside of a marked zone into words and separators.

    Args:
        zone (str): Text between two markers.

    Yields:
        tuple[str, bool]: Each piece with ``True`` if it is a non-empty word
            (a gloss candidate), ``False`` for separator runs and empty words.
    """
    for i, piece in enumerate(_RE_WORD_BREAK.split(zone)):
        yield piece, i % 2 == 0 and piece != ""


def parse_text(raw: str) -> Result[Text]:
    """Parse a document into literal and translatable segments.

    Args:
        raw (str): The document text.

    Returns:
        Result[Text]: The segments in document order, or the gloss parser's
            failure for the first unparseable word, unchanged.
    """
    return collect(_segments(raw))


def to_string(translate: TranslateFn, text: Text) -> str:
    """Render a parsed document.

    Args:
        translate (TranslateFn): Produces the word form for a gloss.
        text (Text): Segments from [`parse_text`][aulang.text.parse_text].

    Returns:
        str: The concatenation of literal strings and translated glosses.
    """
    return "".join(
        translate(segment.gloss) if isinstance(segment, TranslatableSegment) else segment.string
        for segment in text
    )


def _segments(raw: str) -> Iterator[Result[Segment]]:
    """Yield one result per segment, in document order."""
    for piece, marked in split_markers(raw):
        if not marked:
            yield success(LiteralSegment(piece))
            continue
        logger.trace("marked zone %r", piece)
        for word, is_gloss in split_words(piece):
            if is_gloss:
                yield map_result(
                    parse_gloss(GlossMode.IMPLICIT_POINTERS, word), TranslatableSegment
                )
            else:
                yield success(LiteralSegment(word))

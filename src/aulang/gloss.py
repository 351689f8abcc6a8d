# topmark:header:start
#
#   project      : Au
#   file         : gloss.py
#   file_relpath : src/aulang/gloss.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gloss values and their token grammar.

A gloss names a target-language word: either a literal word form, or a
pointer to a lexicon entry, optionally followed by grammatical features::

    bear#PL        pointer or literal, depending on the mode
    [bear]#PL      explicit pointer to the lexeme ``bear``
    ^bäryn         explicit literal word form

Which kind a bare word denotes depends on the [`GlossMode`][]: lexicon
translation cells are read with implicit literals (a bare ``bäryn`` is a word
form), document glosses with implicit pointers (a bare ``bear`` refers to the
lexeme). A token never contains whitespace.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Union

from aulang.config.logging import get_logger
from aulang.result import failure, success

if TYPE_CHECKING:
    from aulang.config.logging import AuLogger
    from aulang.result import Result

logger: AuLogger = get_logger(__name__)

POINTER_OPEN: Final[str] = "["
POINTER_CLOSE: Final[str] = "]"
LITERAL_PREFIX: Final[str] = "^"
FEATURE_PREFIX: Final[str] = "#"

_RE_WORD: Final[re.Pattern[str]] = re.compile(r"[^\s#\[\]^]+")
_RE_FEATURE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9_.]+")


class GlossMode(Enum):
    """How a bare (unmarked) word in a gloss token is interpreted.

    Members:
        IMPLICIT_LITERALS: A bare word is a literal word form; pointers must be
            bracketed. Used for lexicon translation cells.
        IMPLICIT_POINTERS: A bare word is a lexeme id; literals must be prefixed
            with ``^``. Used for glosses in documents and on the command line.
    """

    IMPLICIT_LITERALS = "implicit-literals"
    IMPLICIT_POINTERS = "implicit-pointers"


@dataclass(frozen=True)
class LiteralStem:
    """A word form used verbatim."""

    text: str


@dataclass(frozen=True)
class PointerStem:
    """A reference to a lexicon entry by id."""

    lexeme_id: str


Stem = Union[LiteralStem, PointerStem]


@dataclass(frozen=True)
class Gloss:
    """A parsed gloss token.

    Attributes:
        stem (Stem): The word form or lexeme reference.
        features (tuple[str, ...]): Grammatical features in source order
            (e.g. ``("PL",)`` for ``bear#PL``).
    """

    stem: Stem
    features: tuple[str, ...] = ()


def literal(text: str) -> Gloss:
    """Return a featureless literal gloss for ``text``.

    Serialized with `GlossMode.IMPLICIT_LITERALS`, the result is ``text`` itself.
    """
    return Gloss(LiteralStem(text))


def parse_gloss(mode: GlossMode, token: str) -> Result[Gloss]:
    """Parse a single gloss token.

    Args:
        mode (GlossMode): Interpretation of bare words.
        token (str): The raw token, without surrounding whitespace.

    Returns:
        Result[Gloss]: The gloss, or a failure whose message starts with
            ``Failed to parse "<token>"`` followed by the reason.
    """
    if token == "":
        if mode is GlossMode.IMPLICIT_LITERALS:
            return success(literal(""))
        return failure('Failed to parse "": empty gloss')

    scanned: Gloss | str = _scan(mode, token)
    if isinstance(scanned, str):
        logger.debug("gloss %r rejected (%s): %s", token, mode.value, scanned)
        return failure(f'Failed to parse "{token}": {scanned}')
    logger.trace("gloss %r parsed as %r", token, scanned)
    return success(scanned)


def serialize_gloss(mode: GlossMode, gloss: Gloss) -> str:
    """Render a gloss back to token form.

    Bare words are used for the kind that is implicit in ``mode``; the other
    kind is marked (``[id]`` or ``^text``).

    Args:
        mode (GlossMode): Interpretation of bare words.
        gloss (Gloss): The gloss to render.

    Returns:
        str: The token; parsing it with the same mode yields ``gloss`` again
            whenever the stem text is itself a valid word.
    """
    stem = gloss.stem
    if isinstance(stem, PointerStem):
        head = (
            stem.lexeme_id
            if mode is GlossMode.IMPLICIT_POINTERS
            else f"{POINTER_OPEN}{stem.lexeme_id}{POINTER_CLOSE}"
        )
    elif mode is GlossMode.IMPLICIT_POINTERS or (not stem.text and gloss.features):
        head = f"{LITERAL_PREFIX}{stem.text}"
    else:
        head = stem.text
    return head + "".join(f"{FEATURE_PREFIX}{feature}" for feature in gloss.features)


def _scan(mode: GlossMode, token: str) -> Gloss | str:
    """Scan a non-empty token; return the gloss or the reason it is invalid."""
    stem: Stem
    if token.startswith(POINTER_OPEN):
        match = _RE_WORD.match(token, 1)
        if match is None:
            return f'expected a lexeme id after "{POINTER_OPEN}" at column 2'
        pos = match.end()
        if not token.startswith(POINTER_CLOSE, pos):
            return f'expected "{POINTER_CLOSE}" at column {pos + 1}'
        stem = PointerStem(match.group())
        pos += 1
    elif token.startswith(LITERAL_PREFIX):
        match = _RE_WORD.match(token, 1)
        stem = LiteralStem(match.group() if match else "")
        pos = match.end() if match else 1
    else:
        match = _RE_WORD.match(token)
        if match is None:
            return f"expected a word at column 1, found {token[0]!r}"
        word = match.group()
        stem = PointerStem(word) if mode is GlossMode.IMPLICIT_POINTERS else LiteralStem(word)
        pos = match.end()

    features: list[str] = []
    while pos < len(token):
        if token[pos] != FEATURE_PREFIX:
            return f"unexpected {token[pos]!r} at column {pos + 1}"
        match = _RE_FEATURE.match(token, pos + 1)
        if match is None:
            return f'expected a feature name after "{FEATURE_PREFIX}" at column {pos + 2}'
        features.append(match.group())
        pos = match.end()

    return Gloss(stem, tuple(features))

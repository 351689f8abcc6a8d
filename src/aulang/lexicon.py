# topmark:header:start
#
#   project      : Au
#   file         : lexicon.py
#   file_relpath : src/aulang/lexicon.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexicon table parsing and serialization.

A lexicon is a comma-separated table whose header names at least the three
reserved columns ``id``, ``translation`` and ``generator``, in any order.
Every other column is a *user column*: its values are carried along
positionally and written back untouched.

Parsing is all-or-nothing. A missing header, missing reserved columns, a
malformed table or a single unparseable translation makes the whole call fail
with a descriptive message; no partial lexicon is ever returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

from aulang.config.logging import get_logger
from aulang.constants import GENERATOR_COLUMN, ID_COLUMN, TRANSLATION_COLUMN
from aulang.gloss import Gloss, GlossMode, parse_gloss, serialize_gloss
from aulang.result import Failure, collect, failure, flat_map, map_result, success
from aulang.table import parse_table, serialize_table

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from aulang.config.logging import AuLogger
    from aulang.result import Result

logger: AuLogger = get_logger(__name__)

REQUIRED_COLUMNS: Final[tuple[str, ...]] = (ID_COLUMN, TRANSLATION_COLUMN, GENERATOR_COLUMN)

LexiconIndex = dict[str, Gloss]


@dataclass(frozen=True)
class Lexeme:
    """One data row of the lexicon.

    Attributes:
        id (str): Identifier glosses point at. Uniqueness is not enforced.
        translation (Gloss): Target-language form, read with implicit literals.
        generator (str): Name of the word-generation rule for this entry.
        user_columns (tuple[str, ...]): Values of the non-reserved columns, in
            header order. Cells beyond the header width are appended here too.
    """

    id: str
    translation: Gloss
    generator: str
    user_columns: tuple[str, ...] = ()

    def with_translation(self, translation: Gloss) -> Lexeme:
        """Return a copy of this lexeme with a different translation."""
        return replace(self, translation=translation)


@dataclass(frozen=True)
class Lexicon:
    """A parsed lexicon table.

    Attributes:
        column_order (tuple[str, ...]): Header cells exactly as written; the
            serializer emits columns in this order.
        lexemes (tuple[Lexeme, ...]): Entries in row order.
    """

    column_order: tuple[str, ...]
    lexemes: tuple[Lexeme, ...] = ()


@dataclass(frozen=True)
class ColumnBinding:
    """Positions of the reserved columns within a header row.

    The binding is the single place that maps header names to lexeme fields,
    in both directions: [`bind`][aulang.lexicon.ColumnBinding.bind] turns a
    row into a `Lexeme`, [`unbind`][aulang.lexicon.ColumnBinding.unbind] turns
    a `Lexeme` back into a row.

    Attributes:
        indices (Mapping[str, int]): Reserved column name to position. When a
            name occurs more than once, the first occurrence is bound and later
            ones are user columns.
        width (int): Number of header cells.
    """

    indices: Mapping[str, int] = field(hash=False)
    width: int

    @classmethod
    def resolve(cls, header: Sequence[str]) -> Result[ColumnBinding]:
        """Bind the reserved columns of ``header``.

        Args:
            header (Sequence[str]): Header cells, already unquoted.

        Returns:
            Result[ColumnBinding]: The binding, or a failure listing the missing
                reserved columns in canonical order.
        """
        missing: list[str] = [name for name in REQUIRED_COLUMNS if name not in header]
        if missing:
            return failure(f"missing header columns: {', '.join(missing)}")
        return success(
            cls(
                indices={name: header.index(name) for name in REQUIRED_COLUMNS},
                width=len(header),
            )
        )

    @property
    def reserved(self) -> frozenset[int]:
        """Positions occupied by reserved columns."""
        return frozenset(self.indices.values())

    def bind(self, row: Sequence[str]) -> Result[Lexeme]:
        """Build a lexeme from a data row.

        Short rows are padded with empty cells up to the header width. Longer
        rows are kept as they are; the surplus cells become trailing user
        column values.

        Args:
            row (Sequence[str]): Data row cells.

        Returns:
            Result[Lexeme]: The lexeme, or the gloss parser's failure for the
                translation cell, unchanged.
        """
        cells: list[str] = pad_row(row, self.width)
        if len(cells) > self.width:
            logger.debug(
                "row %r has %d cell(s) beyond the %d header column(s)",
                cells[self.indices[ID_COLUMN]],
                len(cells) - self.width,
                self.width,
            )
        reserved = self.reserved
        return map_result(
            parse_gloss(GlossMode.IMPLICIT_LITERALS, cells[self.indices[TRANSLATION_COLUMN]]),
            lambda translation: Lexeme(
                id=cells[self.indices[ID_COLUMN]],
                translation=translation,
                generator=cells[self.indices[GENERATOR_COLUMN]],
                user_columns=tuple(cell for i, cell in enumerate(cells) if i not in reserved),
            ),
        )

    def unbind(self, lexeme: Lexeme) -> list[str]:
        """Lay out a lexeme's values at the positions of their source columns.

        User column values fill the non-reserved positions left to right.
        Missing values are written as empty cells; surplus values extend the
        row past the header width.

        Args:
            lexeme (Lexeme): The lexeme to lay out.

        Returns:
            list[str]: The row cells.
        """
        by_position: dict[int, str] = {
            self.indices[ID_COLUMN]: lexeme.id,
            self.indices[TRANSLATION_COLUMN]: serialize_gloss(
                GlossMode.IMPLICIT_LITERALS, lexeme.translation
            ),
            self.indices[GENERATOR_COLUMN]: lexeme.generator,
        }
        width: int = max(self.width, len(by_position) + len(lexeme.user_columns))
        user_values = iter(lexeme.user_columns)
        return [
            by_position[i] if i in by_position else next(user_values, "") for i in range(width)
        ]


def empty_row(row: Sequence[str]) -> bool:
    """Return True if ``row`` is a blank line.

    Only a row of exactly one whitespace-only cell counts: a line such as
    ``,,`` has several (blank) fields and is kept as data.
    """
    return len(row) == 1 and not row[0].strip()


def pad_row(row: Sequence[str], width: int) -> list[str]:
    """Return ``row`` extended with empty cells to at least ``width`` cells."""
    return [*row, *([""] * (width - len(row)))]


def parse_lexicon(raw: str) -> Result[Lexicon]:
    """Parse lexicon table text.

    Blank lines are ignored anywhere in the input. The first remaining row is
    the header; every following row is an entry.

    Args:
        raw (str): The table text.

    Returns:
        Result[Lexicon]: The lexicon, or the first failure in source order:
            ``missing header row``, ``missing header columns: <names>``, a
            table tokenizer message, or a gloss parser message.
    """
    return flat_map(parse_table(raw), _rows_to_lexicon)


def _rows_to_lexicon(rows: list[list[str]]) -> Result[Lexicon]:
    """Turn tokenized rows into a lexicon."""
    non_empty: list[list[str]] = [row for row in rows if not empty_row(row)]
    if not non_empty:
        return failure("missing header row")
    header, *data_rows = non_empty

    binding: Result[ColumnBinding] = ColumnBinding.resolve(header)
    if isinstance(binding, Failure):
        return binding

    logger.debug("lexicon header %r, %d data row(s)", header, len(data_rows))
    return map_result(
        collect(binding.value.bind(row) for row in data_rows),
        lambda lexemes: Lexicon(column_order=tuple(header), lexemes=tuple(lexemes)),
    )


def serialize_lexicon(lexicon: Lexicon) -> str:
    """Render a lexicon back to table text.

    The header is ``column_order``; each lexeme's values are written back at
    the positions their columns occupy. Parsing the output yields an equal
    lexicon.

    Args:
        lexicon (Lexicon): The lexicon to render.

    Returns:
        str: The table text, ending with a newline.

    Raises:
        ValueError: If ``column_order`` lacks a reserved column, which a parsed
            lexicon never does.
    """
    binding: Result[ColumnBinding] = ColumnBinding.resolve(lexicon.column_order)
    if isinstance(binding, Failure):
        raise ValueError(f"cannot serialize lexicon: {binding.detail}")
    rows: list[list[str]] = [list(lexicon.column_order)]
    rows.extend(binding.value.unbind(lexeme) for lexeme in lexicon.lexemes)
    return serialize_table(rows)


def index_lexicon(lexicon: Lexicon) -> LexiconIndex:
    """Map each lexeme id to its translation; later rows win on duplicate ids."""
    return {lexeme.id: lexeme.translation for lexeme in lexicon.lexemes}


def needs_regeneration(lexeme: Lexeme) -> bool:
    """Return True if the lexeme's translation is blank or a ``?`` placeholder."""
    rendered: str = serialize_gloss(GlossMode.IMPLICIT_LITERALS, lexeme.translation)
    return rendered == "" or rendered.startswith("?")

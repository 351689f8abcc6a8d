# topmark:header:start
#
#   project      : Au
#   file         : table.py
#   file_relpath : src/aulang/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Comma-separated table tokenizer and serializer.

Thin wrappers around the standard library `csv` module that match what the
lexicon parser expects:

* cells are returned in their original column order, already unquoted;
* a physically blank line is reported as the one-cell row ``[""]`` rather
  than the empty list `csv` produces, so the lexicon's blank-row filter can
  recognize it;
* malformed quoting is reported as a `Failure` instead of an exception.
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING, Final

from aulang.config.logging import get_logger
from aulang.result import failure, success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from aulang.config.logging import AuLogger
    from aulang.result import Result

logger: AuLogger = get_logger(__name__)

Row = list[str]

# Both characters are line breaks to the reader, so the writer must quote either.
_WRITER_TERMINATOR: Final[str] = "\r\n"
ROW_TERMINATOR: Final[str] = "\n"

# Cells are bounded by available memory only; 2**31 - 1 fits a C long everywhere.
csv.field_size_limit(2**31 - 1)


def parse_table(raw: str) -> Result[list[Row]]:
    """Split comma-separated text into rows of cells.

    Args:
        raw (str): The table text. Both ``\\n`` and ``\\r\\n`` line endings are
            accepted; quoted cells may contain commas, quotes (doubled) and
            line breaks.

    Returns:
        Result[list[Row]]: The rows in source order, or a failure describing
            the malformed input (e.g. an unterminated quoted cell).
    """
    reader = csv.reader(io.StringIO(raw, newline=""), strict=True)
    rows: list[Row] = []
    try:
        for row in reader:
            rows.append(row if row else [""])
    except csv.Error as exc:
        logger.debug("csv tokenizer rejected input at line %d: %s", reader.line_num, exc)
        return failure(f"malformed table: {exc} (line {reader.line_num})")

    logger.trace("tokenized %d table row(s)", len(rows))
    return success(rows)


def serialize_table(rows: Sequence[Sequence[str]]) -> str:
    """Render rows as comma-separated text.

    Cells are quoted only when they contain a comma, a quote, a ``\\r`` or a
    ``\\n``. Every row, including the last one, ends with ``\\n``.

    Args:
        rows (Sequence[Sequence[str]]): Rows of cells to write.

    Returns:
        str: The table text; the empty string when ``rows`` is empty.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator=_WRITER_TERMINATOR)
    lines: list[str] = []
    for row in rows:
        writer.writerow(row)
        lines.append(buffer.getvalue().removesuffix(_WRITER_TERMINATOR) + ROW_TERMINATOR)
        buffer.seek(0)
        buffer.truncate()
    return "".join(lines)

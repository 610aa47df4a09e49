"""Row decoder: DKB export text -> raw, dialect-specific records.

Layout of an export (debit shown; the credit export has the same shape with
six columns)::

    "Kontonummer:";"DE12... / Girokonto";          <- type header (skipped)
                                                   <- blank lines are ignored
    "Von:";"01.08.2016";                           <- preamble: malformed rows
    "Bis:";"31.08.2016";
    "Kontostand vom 31.08.2016:";"1.234,56 EUR";
    "Buchungstag";"Wertstellung";...;              <- column titles (skipped)
    "02.09.2016";"02.09.2016";...;"-95,00";...;    <- transactions

Skip rules
----------
1. Rows whose field count differs from the dialect's arity, or that the
   ``csv`` module cannot parse, are skipped silently wherever they occur.
   A single trailing empty field (trailing delimiter) is not counted.
2. The first ``dialect.column_title_rows`` well-formed rows are dropped:
   they are the column-title row that follows the preamble.
"""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable, Iterator

from ..detect import DELIMITER
from ..logging_setup import get_logger
from ..models import RawRecord, SourceDialect

logger = get_logger("dkb_ynab.ingest.decoder")


def decode_row(dialect: SourceDialect, fields: list[str]) -> RawRecord | None:
    """Build the dialect's record from one row, or ``None`` when malformed."""

    if len(fields) == dialect.arity + 1 and fields[-1] == "":
        fields = fields[:-1]
    if len(fields) != dialect.arity:
        return None
    return dialect.record_type(*fields)


def iter_rows(dialect: SourceDialect, lines: Iterable[str]) -> Iterator[RawRecord]:
    """Yield raw records from ``lines``, which start with the type header.

    ``lines`` may be any iterable accepted by :func:`csv.reader` (a text file
    opened with ``newline=""`` or a ``StringIO``), so quoted fields spanning
    several lines stay intact.
    """

    reader = csv.reader(lines, delimiter=DELIMITER)
    header_seen = False
    titles_pending = dialect.column_title_rows

    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            logger.debug("Skipping undecodable row near line %d: %s", reader.line_num, exc)
            continue

        if not row:
            continue
        if not header_seen:
            header_seen = True
            continue

        record = decode_row(dialect, row)
        if record is None:
            logger.debug(
                "Skipping row at line %d: %d fields, expected %d",
                reader.line_num,
                len(row),
                dialect.arity,
            )
            continue
        if titles_pending:
            titles_pending -= 1
            logger.debug("Skipping column-title row at line %d", reader.line_num)
            continue
        yield record


def decode_rows(dialect: SourceDialect, text: str) -> list[RawRecord]:
    """Decode the full export ``text`` (type header included) into records."""

    with io.StringIO(text, newline="") as f:
        records = list(iter_rows(dialect, f))
    logger.info("Decoded %d %s rows", len(records), dialect.name.lower())
    return records


__all__ = ["decode_row", "decode_rows", "iter_rows"]

"""Dialect detection from the first line of a DKB export.

The first line of both exports is a two-field record naming the account, e.g.::

    "Kontonummer:";"DE12345678901234567890 / Girokonto";
    "Kreditkarte:";"4748********1234 Kreditkarte";

The first field (``kind``) is compared against the known markers.
"""

from __future__ import annotations

import csv

from .errors import MalformedHeader, UnknownFileType
from .logging_setup import get_logger
from .models import HeaderLine, SourceDialect

DELIMITER = ";"

logger = get_logger("dkb_ynab.detect")


def split_line(line: str) -> list[str]:
    """Split one ``;``-delimited line, honoring optional double quotes."""

    return next(csv.reader([line.rstrip("\r\n")], delimiter=DELIMITER), [])


def parse_header_line(line: str) -> HeaderLine:
    """Decode the first line into ``(kind, description)``.

    Raises :class:`MalformedHeader` when the line does not hold exactly two
    fields.
    """

    try:
        fields = split_line(line)
    except csv.Error as exc:
        raise MalformedHeader(f"first line is not a valid record: {exc}") from exc
    # A trailing delimiter adds one empty field; `"Kontonummer:";` alone is
    # a kind with an empty description.
    if len(fields) == 3 and fields[-1] == "":
        fields = fields[:-1]
    if len(fields) != 2:
        raise MalformedHeader(
            f"first line must hold 2 fields (kind;description), found {len(fields)}: {line!r}"
        )
    kind, description = fields
    return HeaderLine(kind=kind, description=description)


def detect_dialect(line: str) -> SourceDialect:
    """Classify an export by its first line.

    Raises :class:`MalformedHeader` or :class:`UnknownFileType`.
    """

    header = parse_header_line(line)
    dialect = SourceDialect.from_marker(header.kind)
    if dialect is None:
        raise UnknownFileType(header.kind)
    logger.info("Detected %s export (%s)", dialect.name.lower(), header.description)
    return dialect


__all__ = ["DELIMITER", "detect_dialect", "parse_header_line", "split_line"]

"""Ingest utilities shared by the API and the CLI.

DKB exports are Windows-1252 encoded (the column titles contain umlauts such
as ``Begünstigter``). Files re-saved by other tools may be UTF-8 instead, so
reading tries UTF-8 first and falls back to Windows-1252 with replacement
characters, which never fails.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from ..detect import detect_dialect
from ..models import RawRecord, SourceDialect
from .decoder import decode_rows

FALLBACK_ENCODING = "cp1252"


def decode_bytes(raw: bytes) -> str:
    """Decode export bytes, tolerating Windows-1252 content."""

    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode(FALLBACK_ENCODING, errors="replace")


def read_export_text(path: str | PathLike[str]) -> str:
    """Read an export file from disk and return its decoded text."""

    with Path(path).open("rb") as f:
        return decode_bytes(f.read())


def first_line(text: str) -> str:
    """Return the first non-empty line of ``text`` (``""`` when there is none)."""

    for line in text.splitlines():
        if line:
            return line
    return ""


def load_raw_records(text: str) -> tuple[SourceDialect, list[RawRecord]]:
    """Detect the dialect of ``text`` and decode its rows.

    Raises :class:`~dkb_ynab.errors.MalformedHeader` or
    :class:`~dkb_ynab.errors.UnknownFileType` before any row is decoded.
    """

    dialect = detect_dialect(first_line(text))
    return dialect, decode_rows(dialect, text)


__all__ = ["decode_bytes", "first_line", "load_raw_records", "read_export_text"]

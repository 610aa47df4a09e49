"""Exception types raised by the ``dkb_ynab`` conversion pipeline.

Fatal errors (:class:`UnknownFileType`, :class:`MalformedHeader`) abort a run
before any output is written. :class:`AmountFormat` is per-record and is
absorbed by the field mapper, which treats the amount as absent.

All types derive from ``ValueError`` so callers that already guard parsing
with ``except ValueError`` keep working.
"""

from __future__ import annotations


class ConversionError(ValueError):
    """Base class for all domain errors of the converter."""


class UnknownFileType(ConversionError):
    """The first line's marker matches neither known export dialect."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"unknown file type: unrecognized marker {kind!r}")


class MalformedHeader(ConversionError):
    """The first line cannot be decoded as a ``kind;description`` record."""


class AmountFormat(ConversionError):
    """An amount string contains no digits to interpret as minor units."""

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"invalid amount: {raw!r}")


__all__ = ["AmountFormat", "ConversionError", "MalformedHeader", "UnknownFileType"]

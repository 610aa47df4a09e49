"""Data models for ``dkb_ynab``.

Two layers of records flow through the pipeline:

- Raw records (:class:`DebitRecord`, :class:`CreditRecord`) hold one input row
  positionally decoded from a semicolon-delimited DKB export. All fields are
  opaque text; no date or number parsing happens at this stage.
- :class:`YnabRecord` is the canonical output row consumed by YNAB's CSV
  import. All fields are strings so the record serializes without further
  formatting decisions.

Records are frozen; every transform produces a new record.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from enum import Enum
from typing import TypeAlias

# ---------------------------------------------------------------------------
# Raw (dialect-specific) records
# ---------------------------------------------------------------------------


# "Buchungstag";"Wertstellung";"Buchungstext";"Auftraggeber / Begünstigter";
# "Verwendungszweck";"Kontonummer";"BLZ";"Betrag (EUR)";"Gläubiger-ID";
# "Mandatsreferenz";"Kundenreferenz";
@dataclass(frozen=True, slots=True)
class DebitRecord:
    """One row of a checking-account (Girokonto) export."""

    buchungstag: str
    wertstellung: str
    buchungstext: str
    auftraggeber: str
    verwendungszweck: str
    kontonummer: str
    blz: str
    betrag: str
    glaeubiger_id: str
    mandatsreferenz: str
    kundenreferenz: str


# "Umsatz abgerechnet";"Wertstellung";"Belegdatum";"Beschreibung";
# "Betrag (EUR)";"Ursprünglicher Betrag";
@dataclass(frozen=True, slots=True)
class CreditRecord:
    """One row of a credit-card export."""

    abgerechnet: str
    wertstellung: str
    belegdatum: str
    beschreibung: str
    betrag: str
    urspruenglicher_betrag: str


RawRecord: TypeAlias = DebitRecord | CreditRecord


# ---------------------------------------------------------------------------
# Dialects
# ---------------------------------------------------------------------------


class SourceDialect(Enum):
    """The two known export layouts, keyed by the marker in the first field.

    Row layout
    ----------
    Each dialect decodes rows into its own record type; ``arity`` is the
    number of fields in that record.

    Column-title rows
    -----------------
    Both exports open with a short preamble of two-field rows (``Von:``,
    ``Bis:``, balance lines) that fail to decode, followed by a row of column
    titles that *does* decode but is not transaction data. ``column_title_rows``
    is the fixed number of well-formed rows dropped after that preamble.
    """

    DEBIT = "Kontonummer:"
    CREDIT = "Kreditkarte:"

    @property
    def marker(self) -> str:
        return self.value

    @property
    def record_type(self) -> type[DebitRecord] | type[CreditRecord]:
        return DebitRecord if self is SourceDialect.DEBIT else CreditRecord

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self.record_type))

    @property
    def arity(self) -> int:
        return len(fields(self.record_type))

    @property
    def column_title_rows(self) -> int:
        return 1

    @classmethod
    def from_marker(cls, kind: str) -> SourceDialect | None:
        for dialect in cls:
            if dialect.marker == kind:
                return dialect
        return None


@dataclass(frozen=True, slots=True)
class HeaderLine:
    """The decoded first line of an export: ``"<kind>";"<description>";``."""

    kind: str
    description: str


# ---------------------------------------------------------------------------
# Output record
# ---------------------------------------------------------------------------


YNAB_COLUMNS: tuple[str, ...] = ("Date", "Payee", "Category", "Memo", "Outflow", "Inflow")


@dataclass(frozen=True, slots=True)
class YnabRecord:
    """A single row of YNAB's CSV import format.

    Field order matches :data:`YNAB_COLUMNS`. Absent values are empty
    strings. ``outflow`` and ``inflow`` are never both non-empty.
    """

    date: str
    payee: str
    category: str
    memo: str
    outflow: str
    inflow: str

    def __post_init__(self) -> None:
        if self.outflow and self.inflow:
            raise ValueError(
                f"outflow and inflow are mutually exclusive: {self.outflow!r}/{self.inflow!r}"
            )

    def as_row(self) -> tuple[str, ...]:
        return astuple(self)


__all__ = [
    "CreditRecord",
    "DebitRecord",
    "HeaderLine",
    "RawRecord",
    "SourceDialect",
    "YNAB_COLUMNS",
    "YnabRecord",
]

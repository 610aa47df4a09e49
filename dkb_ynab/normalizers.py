"""Raw DKB record -> YNAB record normalization.

Dates arrive as ``DD.MM.YYYY`` and leave as ``YYYY/MM/DD``. Amounts arrive in
German notation (``"-1.234,56"``) and are interpreted as integer minor units
(cents) before scaling, so no floating-point rounding is involved. Signed
amounts are split into YNAB's ``Outflow``/``Inflow`` columns.

Both dialects share one mapping function; what differs is captured by a
:class:`FieldMapping` naming the source field for each output column.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .errors import AmountFormat
from .logging_setup import get_logger
from .models import RawRecord, SourceDialect, YnabRecord

logger = get_logger("dkb_ynab.normalizers")

# ---------------------------------------------------------------------------
# Helpers (date/amount normalization)
# ---------------------------------------------------------------------------

_DATE_RE = re.compile(r"\d{2}\.\d{2}\.\d{4}")
_NON_DIGIT_RE = re.compile(r"[^0-9]")
_CENT = Decimal("0.01")


def convert_date(raw: str | None) -> str:
    """``"02.09.2016"`` -> ``"2016/09/02"``; anything else -> ``""``."""

    if raw is None:
        return ""
    s = raw.strip()
    if not _DATE_RE.fullmatch(s):
        return ""
    try:
        dt = datetime.strptime(s, "%d.%m.%Y")
    except ValueError:
        return ""
    return f"{dt.year:04d}/{dt.month:02d}/{dt.day:02d}"


def parse_amount(raw: str | None) -> Decimal:
    """Parse a German-notation amount into a Decimal with two places.

    Every character that is not an ASCII digit is dropped; a leading ``-``
    makes the value negative. The digits are read as cents, so ``"-95,00"``
    becomes ``Decimal("-95.00")`` and ``"1.234,56 EUR"`` becomes
    ``Decimal("1234.56")``.

    Raises :class:`AmountFormat` when no digit remains.
    """

    s = (raw or "").strip()
    digits = _NON_DIGIT_RE.sub("", s)
    if not digits:
        raise AmountFormat(raw or "")
    # Built from the digit tuple: exact for any length, independent of the
    # active decimal context.
    negative = s.startswith("-") and digits.strip("0") != ""
    try:
        return Decimal((int(negative), tuple(int(c) for c in digits), -2))
    except (InvalidOperation, ValueError) as exc:
        raise AmountFormat(raw or "") from exc


def format_amount(d: Decimal) -> str:
    # Exactly two decimals; ASCII dot; no thousands separator. Parsed amounts
    # already carry two places; str() keeps them exact at any length.
    if d.as_tuple().exponent != -2:
        d = d.quantize(_CENT, rounding=ROUND_HALF_UP)
    return str(d)


def split_amount(amount: Decimal | None) -> tuple[str, str]:
    """Return ``(outflow, inflow)`` for a signed amount.

    ``None`` -> both empty; negative -> outflow; zero or positive -> inflow.
    """

    if amount is None:
        return "", ""
    if amount < 0:
        return format_amount(amount.copy_abs()), ""
    return "", format_amount(amount)


# ---------------------------------------------------------------------------
# Per-dialect mapping
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class FieldMapping:
    """Names of the raw-record fields feeding each YNAB column.

    ``payee`` is ``None`` when the dialect has no counterparty column.
    """

    date: str
    payee: str | None
    memo: str
    amount: str


FIELD_MAPPINGS: dict[SourceDialect, FieldMapping] = {
    SourceDialect.DEBIT: FieldMapping(
        date="wertstellung",
        payee="auftraggeber",
        memo="verwendungszweck",
        amount="betrag",
    ),
    SourceDialect.CREDIT: FieldMapping(
        date="wertstellung",
        payee=None,
        memo="beschreibung",
        amount="betrag",
    ),
}


def map_record(dialect: SourceDialect, raw: RawRecord) -> YnabRecord:
    """Convert one raw record of ``dialect`` into a :class:`YnabRecord`.

    An unparseable amount leaves both amount columns empty.
    """

    mapping = FIELD_MAPPINGS[dialect]
    raw_amount = getattr(raw, mapping.amount)
    try:
        amount: Decimal | None = parse_amount(raw_amount)
    except AmountFormat:
        logger.debug("Amount %r is not parseable; leaving amount columns empty", raw_amount)
        amount = None
    outflow, inflow = split_amount(amount)

    return YnabRecord(
        date=convert_date(getattr(raw, mapping.date)),
        payee=getattr(raw, mapping.payee) if mapping.payee else "",
        category="",
        memo=getattr(raw, mapping.memo),
        outflow=outflow,
        inflow=inflow,
    )


def map_records(dialect: SourceDialect, raws: list[RawRecord]) -> list[YnabRecord]:
    return [map_record(dialect, r) for r in raws]


__all__ = [
    "FIELD_MAPPINGS",
    "FieldMapping",
    "convert_date",
    "format_amount",
    "map_record",
    "map_records",
    "parse_amount",
    "split_amount",
]

"""Serialize :class:`~dkb_ynab.models.YnabRecord` rows as YNAB import CSV."""

from __future__ import annotations

import csv
from collections.abc import Iterable
from os import PathLike
from pathlib import Path
from typing import TextIO

from .models import YNAB_COLUMNS, YnabRecord


def write_ynab_csv(records: Iterable[YnabRecord], destination: TextIO) -> int:
    """Write the header and one row per record; return the number of rows.

    Quoting is minimal: only fields containing the delimiter, a quote or a
    newline are quoted.
    """

    writer = csv.writer(destination, delimiter=",", quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(YNAB_COLUMNS)
    count = 0
    for record in records:
        writer.writerow(record.as_row())
        count += 1
    return count


def write_ynab_csv_to_path(records: Iterable[YnabRecord], path: str | PathLike[str]) -> int:
    with Path(path).open("w", encoding="utf-8", newline="") as f:
        return write_ynab_csv(records, f)


__all__ = ["write_ynab_csv", "write_ynab_csv_to_path"]

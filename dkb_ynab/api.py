"""Public conversion API for the ``dkb_ynab`` package.

The pipeline is linear: detect dialect -> decode rows -> map fields -> write.
Everything that can fail fatally (reading the input, detecting the dialect)
happens before the output file is opened, so an unrecognized export never
leaves an output file behind.
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

from .ingest.utils import load_raw_records, read_export_text
from .logging_setup import get_logger
from .models import SourceDialect, YnabRecord
from .normalizers import map_records
from .writer import write_ynab_csv_to_path

logger = get_logger("dkb_ynab.api")


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Outcome of converting one export."""

    dialect: SourceDialect
    records: tuple[YnabRecord, ...]

    @property
    def outflow_count(self) -> int:
        return sum(1 for r in self.records if r.outflow)

    @property
    def inflow_count(self) -> int:
        return sum(1 for r in self.records if r.inflow)


def convert_text(text: str) -> ConversionResult:
    """Convert decoded export text into YNAB records (no I/O).

    Raises :class:`~dkb_ynab.errors.MalformedHeader` or
    :class:`~dkb_ynab.errors.UnknownFileType`.
    """

    dialect, raws = load_raw_records(text)
    return ConversionResult(dialect=dialect, records=tuple(map_records(dialect, raws)))


def convert_file(
    input_path: str | PathLike[str], output_path: str | PathLike[str]
) -> ConversionResult:
    """Convert the export at ``input_path`` and write YNAB CSV to ``output_path``.

    ``OSError`` from reading or writing propagates unchanged. A partially
    written output file is not removed.
    """

    result = convert_text(read_export_text(input_path))
    write_ynab_csv_to_path(result.records, output_path)
    logger.info(
        "Wrote %d records (%d outflows, %d inflows) from %s export to %s",
        len(result.records),
        result.outflow_count,
        result.inflow_count,
        result.dialect.name.lower(),
        output_path,
    )
    return result


__all__ = ["ConversionResult", "convert_file", "convert_text"]

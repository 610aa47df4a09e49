"""Public interface for the ``dkb_ynab`` package.

Converts DKB online-banking CSV exports (checking account and credit card)
into YNAB's CSV import format. This module only re-exports symbols.
"""

from .api import ConversionResult, convert_file, convert_text
from .detect import detect_dialect
from .errors import AmountFormat, ConversionError, MalformedHeader, UnknownFileType
from .models import CreditRecord, DebitRecord, SourceDialect, YnabRecord
from .normalizers import map_record
from .writer import write_ynab_csv

__version__ = "0.1.0"

__all__ = [
    # API
    "convert_file",
    "convert_text",
    "detect_dialect",
    "map_record",
    "write_ynab_csv",
    # Models / types
    "ConversionResult",
    "CreditRecord",
    "DebitRecord",
    "SourceDialect",
    "YnabRecord",
    # Errors
    "AmountFormat",
    "ConversionError",
    "MalformedHeader",
    "UnknownFileType",
]

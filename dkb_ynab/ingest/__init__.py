"""Reading and decoding DKB export files."""

from .decoder import decode_row, decode_rows, iter_rows
from .utils import decode_bytes, load_raw_records, read_export_text

__all__ = [
    "decode_bytes",
    "decode_row",
    "decode_rows",
    "iter_rows",
    "load_raw_records",
    "read_export_text",
]

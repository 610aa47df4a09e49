from pathlib import Path

import pytest
from samples import CREDIT_EXPECTED, CREDIT_EXPORT, DEBIT_EXPECTED, DEBIT_EXPORT

from dkb_ynab.api import convert_file, convert_text
from dkb_ynab.errors import MalformedHeader, UnknownFileType
from dkb_ynab.ingest.utils import decode_bytes, first_line
from dkb_ynab.models import SourceDialect


def _read(path: Path) -> str:
    with path.open(encoding="utf-8", newline="") as f:
        return f.read()


def test_convert_debit_export(debit_export: Path, tmp_path: Path):
    out = tmp_path / "ynab.csv"
    result = convert_file(debit_export, out)

    assert result.dialect is SourceDialect.DEBIT
    assert len(result.records) == 3
    assert (result.outflow_count, result.inflow_count) == (1, 2)
    assert _read(out) == DEBIT_EXPECTED


def test_convert_credit_export(credit_export: Path, tmp_path: Path):
    out = tmp_path / "ynab.csv"
    result = convert_file(credit_export, out)

    assert result.dialect is SourceDialect.CREDIT
    assert _read(out) == CREDIT_EXPECTED


def test_utf8_export_converts_identically(tmp_path: Path):
    src = tmp_path / "utf8.csv"
    src.write_bytes(b"\xef\xbb\xbf" + DEBIT_EXPORT.encode("utf-8"))
    out = tmp_path / "ynab.csv"

    convert_file(src, out)
    assert _read(out) == DEBIT_EXPECTED


def test_unknown_marker_writes_no_output(tmp_path: Path):
    src = tmp_path / "depot.csv"
    src.write_bytes(DEBIT_EXPORT.replace("Kontonummer:", "Depot:").encode("cp1252"))
    out = tmp_path / "ynab.csv"

    with pytest.raises(UnknownFileType):
        convert_file(src, out)
    assert not out.exists()


def test_empty_file_is_malformed(tmp_path: Path):
    src = tmp_path / "empty.csv"
    src.write_bytes(b"")

    with pytest.raises(MalformedHeader):
        convert_file(src, tmp_path / "ynab.csv")
    assert not (tmp_path / "ynab.csv").exists()


def test_missing_input_raises_file_not_found(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        convert_file(tmp_path / "nope.csv", tmp_path / "ynab.csv")


def test_convert_text_without_io():
    result = convert_text(CREDIT_EXPORT)
    assert [r.memo for r in result.records][:2] == ["NETFLIX.COM866-579-7172", "Einzahlung"]


def test_decode_bytes_tolerates_undefined_cp1252_bytes():
    # 0x81 is unassigned in Windows-1252 and invalid as UTF-8.
    text = decode_bytes(b'"Kontonummer:";"DE\x81\xfc";')
    assert text.startswith('"Kontonummer:";"DE')
    assert "ü" in text


def test_first_line_skips_leading_empty_lines():
    assert first_line('\n\n"Kreditkarte:";"1";\n"x";"y";') == '"Kreditkarte:";"1";'
    assert first_line("") == ""

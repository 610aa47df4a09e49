import pytest

from dkb_ynab.detect import detect_dialect, parse_header_line, split_line
from dkb_ynab.errors import MalformedHeader, UnknownFileType
from dkb_ynab.models import HeaderLine, SourceDialect


def test_detects_debit_export():
    line = '"Kontonummer:";"DE12345678901234567890 / Girokonto";'
    assert detect_dialect(line) is SourceDialect.DEBIT


def test_detects_credit_export():
    line = '"Kreditkarte:";"4748********1234 Kreditkarte";'
    assert detect_dialect(line) is SourceDialect.CREDIT


def test_quotes_are_optional_and_line_endings_ignored():
    assert detect_dialect("Kreditkarte:;4748********1234\r\n") is SourceDialect.CREDIT


def test_parse_header_line_returns_kind_and_description():
    header = parse_header_line('"Kontonummer:";"DE12 / Girokonto";')
    assert header == HeaderLine(kind="Kontonummer:", description="DE12 / Girokonto")


@pytest.mark.parametrize(
    "line",
    [
        '"Depot:";"123456";',
        '"kontonummer:";"DE12";',
        '"Kontonummer";"DE12";',
        '"Tagesgeld:";"DE12 / Tagesgeld";',
    ],
)
def test_unknown_marker_is_rejected(line):
    with pytest.raises(UnknownFileType) as excinfo:
        detect_dialect(line)
    assert excinfo.value.kind == line.split(";")[0].strip('"')


@pytest.mark.parametrize(
    "line",
    [
        "",
        '"Kontonummer:"',
        '"Kontonummer:";"DE12";"extra";',
        '"Kontonummer:";"DE12";;',
        "Date,Payee,Category,Memo,Outflow,Inflow",
    ],
)
def test_line_without_two_fields_is_malformed(line):
    with pytest.raises(MalformedHeader):
        detect_dialect(line)


@pytest.mark.parametrize("line", ['"Kontonummer:";', '"Kontonummer:";""', '"Kontonummer:";"";'])
def test_kind_with_empty_description_is_accepted(line):
    assert parse_header_line(line) == HeaderLine(kind="Kontonummer:", description="")
    assert detect_dialect(line) is SourceDialect.DEBIT


def test_split_line_keeps_every_field():
    assert split_line('"a";"b";') == ["a", "b", ""]
    assert split_line('"a";"b";;') == ["a", "b", "", ""]
    assert split_line('"a;b";"c"') == ["a;b", "c"]


def test_dialect_layouts():
    assert SourceDialect.DEBIT.arity == 11
    assert SourceDialect.CREDIT.arity == 6
    assert SourceDialect.DEBIT.field_names[1] == "wertstellung"
    assert SourceDialect.CREDIT.field_names[4] == "betrag"
    assert SourceDialect.from_marker("Kreditkarte:") is SourceDialect.CREDIT
    assert SourceDialect.from_marker("Depot:") is None

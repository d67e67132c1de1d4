"""
Tests for consulta.data.normalize
"""
import pytest

from consulta.data.normalize import (
    RawRow,
    normalize_cell,
    normalize_header,
    parse_account_type,
    parse_marital_status,
    rows_from_lines,
)
from consulta.data.schemas import AccountType, Field, MaritalStatus


class TestNormalizeHeader:

    def test_lower_and_trim(self):
        assert normalize_header("  Data Nascimento ") == "data nascimento"

    def test_surrounding_quotes(self):
        assert normalize_header("'CPF/CNPJ'") == "cpf/cnpj"

    def test_accents_are_kept(self):
        assert normalize_header("Código Agência") == "código agência"


class TestNormalizeCell:

    def test_trim_and_quotes(self):
        assert normalize_cell(["  'Ana'  "], 0) == "Ana"

    def test_inner_apostrophe_is_kept(self):
        assert normalize_cell(["D'Ávila"], 0) == "D'Ávila"

    def test_missing_index_is_empty(self):
        assert normalize_cell(["a"], 3) == ""


class TestRawRow:

    def test_first_alias_wins(self):
        row = RawRow({"cpfcnpj": "111", "cpf": "222"})
        assert row.pick(Field.CLIENT_TAX_ID) == "111"

    def test_later_alias_when_earlier_is_empty(self):
        row = RawRow({"cpfcnpj": "", "cnpj": "333"})
        assert row.pick(Field.CLIENT_TAX_ID) == "333"

    def test_accented_alias(self):
        row = RawRow({"código agência": "12"})
        assert row.pick(Field.CLIENT_AGENCY_CODE) == "12"

    def test_unknown_field_value_is_empty(self):
        assert RawRow({"nome": "Ana"}).pick(Field.CLIENT_EMAIL) == ""


class TestRowsFromLines:

    def test_maps_cells_to_headers(self):
        rows = list(rows_from_lines(['"Nome","CPF"', 'Ana,"111"']))
        assert rows[0].cells == {"nome": "Ana", "cpf": "111"}
        assert rows[0].line_number == 2

    def test_short_row_pads_with_empty(self):
        rows = list(rows_from_lines(["nome,email", "Ana"]))
        assert rows[0].get("email") == ""

    def test_blank_lines_are_skipped(self):
        rows = list(rows_from_lines(["nome", "", "Ana", "  "]))
        assert [r.get("nome") for r in rows] == ["Ana"]

    def test_no_lines(self):
        assert list(rows_from_lines([])) == []


class TestParseMaritalStatus:

    @pytest.mark.parametrize("text,expected", [
        ("Casado", MaritalStatus.MARRIED),
        ("CASADO(A)", MaritalStatus.MARRIED),
        ("viuvo", MaritalStatus.WIDOWED),
        ("Viúva", MaritalStatus.WIDOWED),
        ("Divorciada", MaritalStatus.DIVORCED),
        ("Solteiro", MaritalStatus.SINGLE),
        ("união estável", MaritalStatus.SINGLE),
        ("", MaritalStatus.SINGLE),
    ])
    def test_keywords(self, text, expected):
        assert parse_marital_status(text) == expected


class TestParseAccountType:

    @pytest.mark.parametrize("text,expected", [
        ("Poupança", AccountType.SAVINGS),
        ("POUPANCA", AccountType.SAVINGS),
        ("Corrente", AccountType.CHECKING),
        ("salário", AccountType.CHECKING),
        ("", AccountType.CHECKING),
    ])
    def test_keywords(self, text, expected):
        assert parse_account_type(text) == expected

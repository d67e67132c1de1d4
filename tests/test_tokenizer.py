"""
Tests for consulta.data.tokenizer
"""
from consulta.data.tokenizer import split_csv_line


class TestSplitCsvLine:

    def test_simple_fields(self):
        assert split_csv_line("Ana,111,ana@example.com") == ["Ana", "111", "ana@example.com"]

    def test_quoted_field_keeps_delimiter(self):
        assert split_csv_line('Ana,"Rua A, 10",111') == ["Ana", "Rua A, 10", "111"]

    def test_quotes_are_not_emitted(self):
        assert split_csv_line('"nome","cpfcnpj"') == ["nome", "cpfcnpj"]

    def test_trailing_field_without_delimiter(self):
        assert split_csv_line("a,b,c")[-1] == "c"

    def test_trailing_delimiter_yields_empty_last_field(self):
        assert split_csv_line("a,b,") == ["a", "b", ""]

    def test_empty_line_yields_single_empty_field(self):
        assert split_csv_line("") == [""]

    def test_whitespace_is_preserved(self):
        assert split_csv_line(" Ana , 111 ") == [" Ana ", " 111 "]

    def test_doubled_quote_is_not_an_escape(self):
        # Each quote toggles, so doubled quotes simply vanish
        assert split_csv_line('"say ""hi"", ok",x') == ["say hi, ok", "x"]

    def test_unbalanced_quote_swallows_rest_of_line(self):
        assert split_csv_line('a,"b,c') == ["a", "b,c"]

    def test_custom_delimiter(self):
        assert split_csv_line('a;"b;c";d', delimiter=";") == ["a", "b;c", "d"]

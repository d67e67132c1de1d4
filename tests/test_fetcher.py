"""
Tests for consulta.data.fetcher (offline: the HTTP session is stubbed).
"""
import pytest
import requests

from consulta.data.fetcher import SheetFetcher, split_lines
from consulta.data.schemas import Sheet
from consulta.errors import EmptyFeedError, FetchError


class _Response:
    def __init__(self, status_code=200, body="", reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self.content = body.encode("utf-8")


class _Session:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


def _fetcher(session, **kwargs):
    return SheetFetcher(base_url="https://example.com/export?tqx=out:csv", session=session, **kwargs)


class TestSplitLines:

    def test_crlf_and_lf(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_blank_lines_dropped(self):
        assert split_lines("a\n\n  \r\nb\n") == ["a", "b"]


class TestSheetFetcher:

    def test_sends_sheet_parameter(self):
        session = _Session(_Response(body="nome\nAna"))
        _fetcher(session, timeout=5.0).fetch_lines(Sheet.CLIENTS)
        url, params, timeout = session.requests[0]
        assert url == "https://example.com/export?tqx=out:csv"
        assert params == {"sheet": "clientes"}
        assert timeout == 5.0

    def test_default_tab_names_match_spreadsheet(self):
        fetcher = _fetcher(_Session())
        assert [fetcher.tab_name(s) for s in Sheet] == ["clientes", "contas", "agencias"]

    def test_tab_name_override(self):
        session = _Session(_Response(body="nome\nAna"))
        fetcher = _fetcher(session, sheet_names={"clients": "Clientes 2024"})
        fetcher.fetch_lines(Sheet.CLIENTS)
        assert session.requests[0][1] == {"sheet": "Clientes 2024"}

    def test_returns_non_blank_lines(self):
        session = _Session(_Response(body="nome,cpfcnpj\r\n\r\nAna,111\r\n"))
        assert _fetcher(session).fetch_lines(Sheet.CLIENTS) == ["nome,cpfcnpj", "Ana,111"]

    def test_utf8_without_charset(self):
        session = _Session(_Response(body="\ufeffcódigo,endereço\n1,Rua São João"))
        lines = _fetcher(session).fetch_lines(Sheet.AGENCIES)
        assert lines == ["código,endereço", "1,Rua São João"]

    def test_every_call_downloads(self):
        session = _Session(_Response(body="nome\nAna"))
        fetcher = _fetcher(session)
        fetcher.fetch_lines(Sheet.CLIENTS)
        fetcher.fetch_lines(Sheet.CLIENTS)
        assert len(session.requests) == 2

    def test_http_error(self):
        session = _Session(_Response(status_code=404, reason="Not Found"))
        with pytest.raises(FetchError) as info:
            _fetcher(session).fetch_lines(Sheet.ACCOUNTS)
        assert info.value.status_code == 404
        assert info.value.sheet == "contas"
        assert "Not Found" in str(info.value)

    def test_transport_error(self):
        session = _Session(exc=requests.ConnectionError("connection refused"))
        with pytest.raises(FetchError) as info:
            _fetcher(session).fetch_lines(Sheet.CLIENTS)
        assert info.value.status_code is None
        assert "connection refused" in str(info.value)

    @pytest.mark.parametrize("body", ["", "\n\n", "nome,cpfcnpj\n"])
    def test_no_data_rows(self, body):
        session = _Session(_Response(body=body))
        with pytest.raises(EmptyFeedError):
            _fetcher(session).fetch_lines(Sheet.CLIENTS)

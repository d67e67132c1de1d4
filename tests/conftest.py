"""
Shared fixtures: sample sheets and an offline fetcher.
"""
from __future__ import annotations

import pytest

from consulta.data.fetcher import split_lines
from consulta.data.store import Repository
from consulta.errors import EmptyFeedError, FetchError

CLIENTS_CSV = (
    "id,nome,cpfcnpj,rg,email,endereco,datanascimento,nomesocial,rendaanual,patrimonio,estadocivil,codigoagencia\r\n"
    '1,Ana Souza,123.456.789-00,MG-1,ana@example.com,"Rua A, 10",25/12/1990,,"5000,50",100000,Casado,12\r\n'
    '2,Bruno Lima,987.654.321-00,,bruno@example.com,Rua B,1985-03-07,Bia,R$ 80000,"R$ 1.234,56",Viúvo,12\r\n'
    "3,   ,111,,,,,,,,,\r\n"
    "\r\n"
    "4,Carla Dias,11.222.333/0001-81,,,,07-03-1975,,abc,,divorciada,7\r\n"
    ",Davi Rocha,555,,,,not a date,,,,,3\r\n"
)

ACCOUNTS_CSV = (
    "id,cpfcnpjcliente,tipo,saldo,limitecredito,creditodisponivel\n"
    'a1,123.456.789-00,Corrente,"1500,00",2000,500\n'
    "a2,123.456.789-00,Poupança,-200,,\n"
    'a3,987.654.321-00,poupanca,"10,5",0,0\n'
    "a4,12345678900,corrente,1,1,1\n"
)

AGENCIES_CSV = (
    "id,codigo,nome,endereco\n"
    'g1,12,Centro,"Av. Central, 100"\n'
    "g2,7,Norte,\n"
    "g3,12,Centro Duplicada,Rua X\n"
)


class FakeFetcher:
    """Serves sheet bodies from memory. A value that is an exception is raised instead."""

    def __init__(self, sheets: dict) -> None:
        self.sheets = dict(sheets)
        self.calls: list[str] = []

    def fetch_lines(self, sheet) -> list[str]:
        key = getattr(sheet, "value", sheet)
        self.calls.append(key)
        body = self.sheets.get(key, "")
        if isinstance(body, Exception):
            raise body
        lines = split_lines(body)
        if len(lines) < 2:
            raise EmptyFeedError(key, len(lines))
        return lines


@pytest.fixture
def sheets() -> dict:
    return {"clients": CLIENTS_CSV, "accounts": ACCOUNTS_CSV, "agencies": AGENCIES_CSV}


@pytest.fixture
def fetcher(sheets) -> FakeFetcher:
    return FakeFetcher(sheets)


@pytest.fixture
def repository(fetcher) -> Repository:
    repo = Repository(fetcher)
    repo.load_all()
    return repo


@pytest.fixture
def http_error() -> FetchError:
    return FetchError("clients", 500, "Internal Server Error")

"""
Consulta — Configuration: feed endpoint, sheet names, header aliases, keyword tables.
"""
import logging
import os

# ---------------------------------------------------------------------------
# Feed endpoint. Override with CONSULTA_SHEET_URL for another spreadsheet
# ---------------------------------------------------------------------------
SHEET_URL = os.environ.get(
    "CONSULTA_SHEET_URL",
    "https://docs.google.com/spreadsheets/d/1PBN_HQOi5ZpKDd63mouxttFvvCwtmY97Tb5if5_cdBA/gviz/tq?tqx=out:csv",
)

# Tab name sent as the ``sheet`` query parameter, keyed by logical sheet id.
# gviz serves the first tab for an unknown name, so these must match the
# spreadsheet exactly.
SHEET_NAMES = {
    "clients": os.environ.get("CONSULTA_SHEET_CLIENTS", "clientes"),
    "accounts": os.environ.get("CONSULTA_SHEET_ACCOUNTS", "contas"),
    "agencies": os.environ.get("CONSULTA_SHEET_AGENCIES", "agencias"),
}

# Unset → requests waits as long as the transport allows
_timeout = os.environ.get("CONSULTA_HTTP_TIMEOUT")
HTTP_TIMEOUT = float(_timeout) if _timeout else None

# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------
DEFAULT_PAGE_SIZE = int(os.environ.get("CONSULTA_PAGE_SIZE", "10"))
MAX_PAGE_SIZE = 100

# ---------------------------------------------------------------------------
# Header aliases per logical field (normalized keys, first non-empty wins)
# Spreadsheet revisions drift between accented/unaccented, spaced/joined
# and abbreviated headers.
# ---------------------------------------------------------------------------
FIELD_ALIASES = {
    # Client
    "client.id": ("id",),
    "client.name": ("nome", "name"),
    "client.tax_id": ("cpfcnpj", "cpf/cnpj", "cpf", "cnpj"),
    "client.national_id": ("rg",),
    "client.email": ("email", "e-mail"),
    "client.address": ("endereco", "endereço"),
    "client.birth_date": ("datanascimento", "data nascimento", "data_nascimento"),
    "client.social_name": ("nomesocial", "nome social", "nome_social"),
    "client.annual_income": ("rendaanual", "renda anual", "renda_anual"),
    "client.net_worth": ("patrimonio", "patrimônio"),
    "client.marital_status": ("estadocivil", "estado civil", "estado_civil"),
    "client.agency_code": ("codigoagencia", "código agência", "agencia", "codigo_agencia"),
    # Account
    "account.id": ("id",),
    "account.client_tax_id": ("cpfcnpjcliente", "cpf/cnpj cliente"),
    "account.type": ("tipo",),
    "account.balance": ("saldo",),
    "account.credit_limit": ("limitecredito", "limite crédito"),
    "account.available_credit": ("creditodisponivel", "crédito disponível"),
    # Agency
    "agency.id": ("id",),
    "agency.code": ("codigo", "código"),
    "agency.name": ("nome", "name"),
    "agency.address": ("endereco", "endereço"),
}

# ---------------------------------------------------------------------------
# Enumerated values. First substring match wins.
# ---------------------------------------------------------------------------
MARITAL_STATUS_KEYWORDS = [
    ("casado", "Married"),
    ("viuv", "Widowed"),
    ("viúv", "Widowed"),
    ("divorciad", "Divorced"),
]

ACCOUNT_TYPE_KEYWORDS = [
    ("poupan", "Savings"),
]

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("CONSULTA_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

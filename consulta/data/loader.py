"""
Sheet ingestion: CSV lines → typed Client / Account / Agency collections.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Iterable, Optional, TypeVar

from consulta.data.coerce import parse_date, parse_int, parse_number
from consulta.data.fetcher import SheetFetcher
from consulta.data.normalize import RawRow, parse_account_type, parse_marital_status, rows_from_lines
from consulta.data.schemas import Account, Agency, Client, Field, Sheet
from consulta.errors import EmptyFeedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex}"


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------

def build_client(row: RawRow) -> Optional[Client]:
    """Build a Client, or None when the row has no name."""
    name = row.pick(Field.CLIENT_NAME).strip()
    if not name:
        return None

    return Client(
        id=row.pick(Field.CLIENT_ID) or _new_id("client"),
        name=name,
        tax_id=row.pick(Field.CLIENT_TAX_ID),
        social_name=row.pick(Field.CLIENT_SOCIAL_NAME) or None,
        national_id=row.pick(Field.CLIENT_NATIONAL_ID) or None,
        email=row.pick(Field.CLIENT_EMAIL),
        address=row.pick(Field.CLIENT_ADDRESS),
        birth_date=parse_date(row.pick(Field.CLIENT_BIRTH_DATE)),
        annual_income=parse_number(row.pick(Field.CLIENT_ANNUAL_INCOME)),
        net_worth=parse_number(row.pick(Field.CLIENT_NET_WORTH)),
        marital_status=parse_marital_status(row.pick(Field.CLIENT_MARITAL_STATUS)),
        agency_code=parse_int(row.pick(Field.CLIENT_AGENCY_CODE)),
    )


def build_account(row: RawRow) -> Account:
    return Account(
        id=row.pick(Field.ACCOUNT_ID) or _new_id("account"),
        client_tax_id=row.pick(Field.ACCOUNT_CLIENT_TAX_ID),
        type=parse_account_type(row.pick(Field.ACCOUNT_TYPE)),
        balance=parse_number(row.pick(Field.ACCOUNT_BALANCE)),
        credit_limit=parse_number(row.pick(Field.ACCOUNT_CREDIT_LIMIT)),
        available_credit=parse_number(row.pick(Field.ACCOUNT_AVAILABLE_CREDIT)),
    )


def build_agency(row: RawRow) -> Agency:
    return Agency(
        id=row.pick(Field.AGENCY_ID) or _new_id("agency"),
        code=parse_int(row.pick(Field.AGENCY_CODE)),
        name=row.pick(Field.AGENCY_NAME),
        address=row.pick(Field.AGENCY_ADDRESS),
    )


# ---------------------------------------------------------------------------
# Whole-sheet builders
# ---------------------------------------------------------------------------

def build_clients(lines: Iterable[str]) -> list[Client]:
    """Clients from a header line plus data lines; nameless rows are skipped."""
    clients: list[Client] = []
    dropped = 0
    for row in rows_from_lines(lines):
        client = build_client(row)
        if client is None:
            dropped += 1
            logger.debug("Skipping client row %d: no name", row.line_number)
            continue
        clients.append(client)
    if dropped:
        logger.info("  Dropped %d client rows without a name", dropped)
    return clients


def build_accounts(lines: Iterable[str]) -> list[Account]:
    return [build_account(row) for row in rows_from_lines(lines)]


def build_agencies(lines: Iterable[str]) -> list[Agency]:
    return [build_agency(row) for row in rows_from_lines(lines)]


# ---------------------------------------------------------------------------
# Fetch + build
# ---------------------------------------------------------------------------

def load_sheet(
    fetcher: SheetFetcher,
    sheet: Sheet,
    builder: Callable[[Iterable[str]], list[T]],
) -> list[T]:
    """One ingestion pass for a sheet.

    FetchError propagates; an empty feed yields an empty list.
    """
    try:
        lines = fetcher.fetch_lines(sheet)
    except EmptyFeedError as exc:
        logger.warning("%s — starting with an empty %s collection", exc, sheet.value)
        return []

    items = builder(lines)
    logger.info("  %s: %d rows → %d records", sheet.value, len(lines) - 1, len(items))
    return items


def load_clients(fetcher: SheetFetcher) -> list[Client]:
    return load_sheet(fetcher, Sheet.CLIENTS, build_clients)


def load_accounts(fetcher: SheetFetcher) -> list[Account]:
    return load_sheet(fetcher, Sheet.ACCOUNTS, build_accounts)


def load_agencies(fetcher: SheetFetcher) -> list[Agency]:
    return load_sheet(fetcher, Sheet.AGENCIES, build_agencies)

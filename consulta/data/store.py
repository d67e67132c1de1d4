"""
Repository — in-memory client/account/agency snapshot.

Each sheet is loaded by its own ingestion pass and swapped in whole, so a
reader sees either the previous collection or the new one, never a mix.
A failed pass keeps the previous collection.
"""
from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from consulta.data import loader
from consulta.data.fetcher import SheetFetcher
from consulta.data.query import search_clients
from consulta.data.schemas import (
    Account,
    Agency,
    Client,
    LoadSummary,
    MaritalStatus,
    SearchResult,
    Sheet,
)
from consulta.errors import FetchError

logger = logging.getLogger(__name__)


class Repository:
    """Current snapshot of the three sheets plus join/lookup accessors."""

    def __init__(self, fetcher: Optional[SheetFetcher] = None) -> None:
        self.fetcher = fetcher or SheetFetcher()
        self._clients: tuple[Client, ...] = ()
        self._accounts: tuple[Account, ...] = ()
        self._agencies: tuple[Agency, ...] = ()
        self._errors: dict[str, str] = {}
        self._loaded_at: Optional[dt.datetime] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _record_failure(self, sheet: Sheet, exc: FetchError) -> None:
        self._errors[sheet.value] = str(exc)
        logger.error("Ingestion of %s failed, keeping previous %d records: %s",
                     sheet.value, len(self._collection(sheet)), exc)

    def _collection(self, sheet: Sheet) -> tuple:
        return {
            Sheet.CLIENTS: self._clients,
            Sheet.ACCOUNTS: self._accounts,
            Sheet.AGENCIES: self._agencies,
        }[sheet]

    def _mark_loaded(self, sheet: Sheet) -> None:
        self._errors.pop(sheet.value, None)
        self._loaded_at = dt.datetime.now()

    def load_clients(self) -> list[Client]:
        """Re-fetch the clients sheet and replace the collection. Raises FetchError."""
        try:
            clients = tuple(loader.load_clients(self.fetcher))
        except FetchError as exc:
            self._record_failure(Sheet.CLIENTS, exc)
            raise
        self._clients = clients
        self._mark_loaded(Sheet.CLIENTS)
        return list(clients)

    def load_accounts(self) -> list[Account]:
        """Re-fetch the accounts sheet and replace the collection. Raises FetchError."""
        try:
            accounts = tuple(loader.load_accounts(self.fetcher))
        except FetchError as exc:
            self._record_failure(Sheet.ACCOUNTS, exc)
            raise
        self._accounts = accounts
        self._mark_loaded(Sheet.ACCOUNTS)
        return list(accounts)

    def load_agencies(self) -> list[Agency]:
        """Re-fetch the agencies sheet and replace the collection. Raises FetchError."""
        try:
            agencies = tuple(loader.load_agencies(self.fetcher))
        except FetchError as exc:
            self._record_failure(Sheet.AGENCIES, exc)
            raise
        self._agencies = agencies
        self._mark_loaded(Sheet.AGENCIES)
        return list(agencies)

    def load_all(self) -> LoadSummary:
        """Load every sheet. One sheet failing does not stop the others."""
        logger.info("Loading spreadsheet data...")
        summary = LoadSummary()
        for sheet, load in (
            (Sheet.CLIENTS, self.load_clients),
            (Sheet.ACCOUNTS, self.load_accounts),
            (Sheet.AGENCIES, self.load_agencies),
        ):
            try:
                summary.counts[sheet.value] = len(load())
            except FetchError as exc:
                summary.errors[sheet.value] = str(exc)
        return summary

    @property
    def is_loaded(self) -> bool:
        return self._loaded_at is not None

    @property
    def loaded_at(self) -> Optional[dt.datetime]:
        return self._loaded_at

    @property
    def last_errors(self) -> dict[str, str]:
        """Sheets whose most recent ingestion failed, with the error message."""
        return dict(self._errors)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def list_clients(self) -> list[Client]:
        return list(self._clients)

    def list_accounts(self) -> list[Account]:
        return list(self._accounts)

    def list_agencies(self) -> list[Agency]:
        return list(self._agencies)

    # ------------------------------------------------------------------
    # Joins & lookups
    # ------------------------------------------------------------------

    def accounts_for_client(self, tax_id: str) -> list[Account]:
        """Accounts whose client_tax_id equals ``tax_id`` exactly (no punctuation folding)."""
        return [a for a in self._accounts if a.client_tax_id == tax_id]

    def agency_by_code(self, code: int) -> Optional[Agency]:
        """First agency with this code. Later duplicates are unreachable."""
        return next((a for a in self._agencies if a.code == code), None)

    def client_by_id(self, client_id: str) -> Optional[Client]:
        return next((c for c in self._clients if c.id == client_id), None)

    def agency_codes(self) -> list[int]:
        """Distinct agency codes referenced by clients, ascending."""
        return sorted({c.agency_code for c in self._clients})

    def search(
        self,
        term: str = "",
        page: int = 1,
        page_size: int = 10,
        agency_code: Optional[int] = None,
        marital_status: Optional[MaritalStatus] = None,
        email: Optional[str] = None,
    ) -> SearchResult[Client]:
        """search_clients over the current client snapshot."""
        return search_clients(
            self._clients, term, page=page, page_size=page_size,
            agency_code=agency_code, marital_status=marital_status, email=email,
        )

"""
Entity, enum and result schemas for the client/account/agency feed.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar


class Sheet(str, Enum):
    CLIENTS = "clients"
    ACCOUNTS = "accounts"
    AGENCIES = "agencies"


class MaritalStatus(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    WIDOWED = "Widowed"
    DIVORCED = "Divorced"


class AccountType(str, Enum):
    CHECKING = "Checking"
    SAVINGS = "Savings"


class Field(str, Enum):
    """Logical fields resolvable from a raw row. Values key FIELD_ALIASES."""
    CLIENT_ID = "client.id"
    CLIENT_NAME = "client.name"
    CLIENT_TAX_ID = "client.tax_id"
    CLIENT_NATIONAL_ID = "client.national_id"
    CLIENT_EMAIL = "client.email"
    CLIENT_ADDRESS = "client.address"
    CLIENT_BIRTH_DATE = "client.birth_date"
    CLIENT_SOCIAL_NAME = "client.social_name"
    CLIENT_ANNUAL_INCOME = "client.annual_income"
    CLIENT_NET_WORTH = "client.net_worth"
    CLIENT_MARITAL_STATUS = "client.marital_status"
    CLIENT_AGENCY_CODE = "client.agency_code"
    ACCOUNT_ID = "account.id"
    ACCOUNT_CLIENT_TAX_ID = "account.client_tax_id"
    ACCOUNT_TYPE = "account.type"
    ACCOUNT_BALANCE = "account.balance"
    ACCOUNT_CREDIT_LIMIT = "account.credit_limit"
    ACCOUNT_AVAILABLE_CREDIT = "account.available_credit"
    AGENCY_ID = "agency.id"
    AGENCY_CODE = "agency.code"
    AGENCY_NAME = "agency.name"
    AGENCY_ADDRESS = "agency.address"


# ---------------------------------------------------------------------------
# Entities: immutable snapshots, rebuilt wholesale on every ingestion pass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Client:
    id: str
    name: str
    tax_id: str = ""
    social_name: Optional[str] = None
    national_id: Optional[str] = None
    email: str = ""
    address: str = ""
    birth_date: Optional[dt.date] = None   # None when the sheet value was unparseable
    annual_income: float = 0.0
    net_worth: float = 0.0
    marital_status: MaritalStatus = MaritalStatus.SINGLE
    agency_code: int = 0


@dataclass(frozen=True)
class Account:
    id: str
    client_tax_id: str = ""
    type: AccountType = AccountType.CHECKING
    balance: float = 0.0
    credit_limit: float = 0.0
    available_credit: float = 0.0

    @property
    def total_limit(self) -> float:
        """Balance plus credit still available."""
        return self.balance + self.available_credit


@dataclass(frozen=True)
class Agency:
    id: str
    code: int = 0
    name: str = ""
    address: str = ""


# ---------------------------------------------------------------------------
# Query / load results
# ---------------------------------------------------------------------------

T = TypeVar("T")


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """One page of a filtered collection."""
    items: list[T]
    total: int
    total_pages: int
    page: int
    page_size: int


@dataclass
class LoadSummary:
    """Outcome of a full reload: counts per loaded sheet, messages per failed one."""
    counts: dict[str, int] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict

from consulta.data.schemas import AccountType, MaritalStatus


class ClientModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    tax_id: str
    social_name: Optional[str] = None
    national_id: Optional[str] = None
    email: str
    address: str
    birth_date: Optional[dt.date] = None
    annual_income: float
    net_worth: float
    marital_status: MaritalStatus
    agency_code: int


class AccountModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    client_tax_id: str
    type: AccountType
    balance: float
    credit_limit: float
    available_credit: float
    total_limit: float


class AgencyModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: int
    name: str
    address: str


class ClientPage(BaseModel):
    items: list[ClientModel]
    total: int
    total_pages: int
    page: int
    page_size: int


class ClientDetail(BaseModel):
    client: ClientModel
    accounts: list[AccountModel]
    agency: Optional[AgencyModel] = None


class AccountsResponse(BaseModel):
    tax_id: str
    accounts: list[AccountModel]
    count: int


class AgenciesResponse(BaseModel):
    agencies: list[AgencyModel]
    count: int


class AgencyCodesResponse(BaseModel):
    codes: list[int]


class HealthResponse(BaseModel):
    status: str
    clients: int
    accounts: int
    agencies: int
    loaded_at: Optional[dt.datetime] = None
    errors: dict[str, str]


class ReloadResponse(BaseModel):
    status: str
    message: str

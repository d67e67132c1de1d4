"""
Client endpoints: search, detail, accounts.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from consulta.data.store import Repository
from consulta.api.dependencies import ClientSearchParams, get_repository
from consulta.api.response_models import (
    AccountModel, AccountsResponse, AgencyModel, ClientDetail, ClientModel, ClientPage,
)

router = APIRouter(prefix="/api", tags=["clients"])


def _accounts_response(repository: Repository, tax_id: str) -> AccountsResponse:
    accounts = [AccountModel.model_validate(a) for a in repository.accounts_for_client(tax_id)]
    return AccountsResponse(tax_id=tax_id, accounts=accounts, count=len(accounts))


@router.get("/clients", response_model=ClientPage)
def list_clients(
    params: ClientSearchParams = Depends(),
    repository: Repository = Depends(get_repository),
):
    """Filtered, paginated client list. Pages past the end come back empty."""
    result = repository.search(
        params.term,
        page=params.page,
        page_size=params.page_size,
        agency_code=params.agency_code,
        marital_status=params.marital_status,
        email=params.email,
    )
    return ClientPage(
        items=[ClientModel.model_validate(c) for c in result.items],
        total=result.total,
        total_pages=result.total_pages,
        page=result.page,
        page_size=result.page_size,
    )


@router.get("/clients/{client_id}", response_model=ClientDetail)
def client_detail(client_id: str, repository: Repository = Depends(get_repository)):
    """Client with its accounts and agency (agency is null when the code is unknown)."""
    client = repository.client_by_id(client_id)
    if client is None:
        raise HTTPException(404, f"Client not found: {client_id}")
    agency = repository.agency_by_code(client.agency_code)
    return ClientDetail(
        client=ClientModel.model_validate(client),
        accounts=[AccountModel.model_validate(a) for a in repository.accounts_for_client(client.tax_id)],
        agency=AgencyModel.model_validate(agency) if agency else None,
    )


@router.get("/clients/{client_id}/accounts", response_model=AccountsResponse)
def client_accounts(client_id: str, repository: Repository = Depends(get_repository)):
    client = repository.client_by_id(client_id)
    if client is None:
        raise HTTPException(404, f"Client not found: {client_id}")
    return _accounts_response(repository, client.tax_id)


@router.get("/accounts", response_model=AccountsResponse)
def accounts_by_tax_id(
    tax_id: str = Query(..., description="CPF/CNPJ exactly as stored in the accounts sheet"),
    repository: Repository = Depends(get_repository),
):
    return _accounts_response(repository, tax_id)

"""
Agency endpoints: list, codes in use, lookup by code.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from consulta.data.store import Repository
from consulta.api.dependencies import get_repository
from consulta.api.response_models import AgenciesResponse, AgencyCodesResponse, AgencyModel

router = APIRouter(prefix="/api/agencies", tags=["agencies"])


@router.get("", response_model=AgenciesResponse)
def list_agencies(repository: Repository = Depends(get_repository)):
    agencies = [AgencyModel.model_validate(a) for a in repository.list_agencies()]
    return AgenciesResponse(agencies=agencies, count=len(agencies))


@router.get("/codes", response_model=AgencyCodesResponse)
def agency_codes(repository: Repository = Depends(get_repository)):
    """Agency codes referenced by clients (for the agency filter)."""
    return AgencyCodesResponse(codes=repository.agency_codes())


@router.get("/{code}", response_model=AgencyModel)
def agency_by_code(code: int, repository: Repository = Depends(get_repository)):
    agency = repository.agency_by_code(code)
    if agency is None:
        raise HTTPException(404, f"Agency not found: {code}")
    return AgencyModel.model_validate(agency)

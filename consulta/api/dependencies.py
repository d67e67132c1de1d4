"""
FastAPI dependencies — repository lookup, search parameter parsing.
"""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException, Query, Request

from consulta.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from consulta.data.schemas import MaritalStatus
from consulta.data.store import Repository


# ---------------------------------------------------------------------------
# Repository (one instance per app, created in create_app)
# ---------------------------------------------------------------------------

def get_repository_or_empty(request: Request) -> Repository:
    """Return the repository even if nothing has loaded yet (health/reload)."""
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(503, "Server not initialized yet")
    return repository


def get_repository(request: Request) -> Repository:
    repository = get_repository_or_empty(request)
    if not repository.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return repository


# ---------------------------------------------------------------------------
# Search parameters
# ---------------------------------------------------------------------------

class ClientSearchParams:
    def __init__(
        self,
        q: str = Query("", description="Name, social name or CPF/CNPJ (with or without punctuation)"),
        page: int = Query(1, ge=1),
        page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
        agency: Optional[int] = Query(None, description="Agency code filter"),
        marital_status: Optional[str] = Query(None, description="Single|Married|Widowed|Divorced"),
        email: Optional[str] = Query(None, description="Email contains (case-insensitive)"),
    ) -> None:
        self.term = q
        self.page = page
        self.page_size = page_size
        self.agency_code = agency
        self.email = email
        self.marital_status: Optional[MaritalStatus] = None
        if marital_status:
            try:
                self.marital_status = MaritalStatus(marital_status.capitalize())
            except ValueError:
                raise HTTPException(400, f"Invalid marital_status: {marital_status}")

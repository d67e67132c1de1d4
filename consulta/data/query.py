"""
Client search and pagination over an in-memory snapshot.
"""
from __future__ import annotations

import math
from typing import Optional, Sequence, TypeVar

from consulta.data.coerce import digits_only
from consulta.data.schemas import Client, MaritalStatus, SearchResult

T = TypeVar("T")


def matches_term(client: Client, term: str) -> bool:
    """Case-insensitive match on name, social name or tax id.

    Tax ids also match digits-to-digits, so '12345678900' finds
    '123.456.789-00'. ``term`` must already be trimmed and lower-cased.
    """
    if client.name and term in client.name.lower():
        return True
    if client.social_name and term in client.social_name.lower():
        return True
    if client.tax_id:
        if term in client.tax_id.lower():
            return True
        term_digits = digits_only(term)
        if term_digits and term_digits in digits_only(client.tax_id):
            return True
    return False


def paginate(items: Sequence[T], page: int = 1, page_size: int = 10) -> SearchResult[T]:
    """Slice one page. Pages past the end are empty, never clamped."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    total = len(items)
    start = (page - 1) * page_size
    return SearchResult(
        items=list(items[start:start + page_size]),
        total=total,
        total_pages=math.ceil(total / page_size),
        page=page,
        page_size=page_size,
    )


def search_clients(
    clients: Sequence[Client],
    term: str = "",
    page: int = 1,
    page_size: int = 10,
    agency_code: Optional[int] = None,
    marital_status: Optional[MaritalStatus] = None,
    email: Optional[str] = None,
) -> SearchResult[Client]:
    """Filter by free-text term, agency, marital status and email, then paginate.

    ``email`` is a case-insensitive substring match on the email column only;
    blank means no email filter.
    """
    filtered: Sequence[Client] = clients

    if agency_code is not None:
        filtered = [c for c in filtered if c.agency_code == agency_code]
    if marital_status is not None:
        filtered = [c for c in filtered if c.marital_status == marital_status]
    email_needle = (email or "").strip().lower()
    if email_needle:
        filtered = [c for c in filtered if email_needle in c.email.lower()]

    needle = (term or "").strip().lower()
    if needle:
        filtered = [c for c in filtered if matches_term(c, needle)]

    return paginate(filtered, page, page_size)

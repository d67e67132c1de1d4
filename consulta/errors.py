"""
Ingestion errors.

Hierarchy:
    ConsultaError
    ├── FetchError        → transport failure or non-success response
    └── EmptyFeedError    → feed downloaded but has no data rows

Row-level coercion problems are never raised; every field has a default.
"""
from __future__ import annotations

from typing import Optional


class ConsultaError(Exception):
    """Base class for every error raised by the ingestion layer."""


class FetchError(ConsultaError):
    """A sheet could not be downloaded.

    ``status_code`` is None when the request never got a response
    (DNS, connection reset, transport timeout).
    """

    def __init__(self, sheet: str, status_code: Optional[int] = None, reason: str = ""):
        self.sheet = sheet
        self.status_code = status_code
        self.reason = reason
        if status_code is not None:
            message = f"Failed to fetch sheet '{sheet}': HTTP {status_code}"
        else:
            message = f"Failed to fetch sheet '{sheet}'"
        if reason:
            message += f" — {reason}"
        super().__init__(message)


class EmptyFeedError(ConsultaError):
    """The sheet has no header row or no data rows below it.

    Loaders turn this into an empty collection; it is not a failure.
    """

    def __init__(self, sheet: str, line_count: int = 0):
        self.sheet = sheet
        self.line_count = line_count
        super().__init__(f"Sheet '{sheet}' has no data rows ({line_count} non-blank lines)")

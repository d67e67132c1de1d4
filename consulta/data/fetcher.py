"""
Sheet download — one GET per call against the spreadsheet CSV export.

No retry, no cache: every call re-downloads.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

import requests

from consulta.config import HTTP_TIMEOUT, SHEET_NAMES, SHEET_URL
from consulta.data.schemas import Sheet
from consulta.errors import EmptyFeedError, FetchError

logger = logging.getLogger(__name__)

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split on CRLF or LF and drop blank lines."""
    return [line for line in _LINE_BREAK_RE.split(text) if line.strip()]


class SheetFetcher:
    """Downloads one tab of the published spreadsheet as CSV lines."""

    def __init__(
        self,
        base_url: str = SHEET_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = HTTP_TIMEOUT,
        sheet_names: Optional[dict[str, str]] = None,
    ) -> None:
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.sheet_names = dict(SHEET_NAMES if sheet_names is None else sheet_names)

    def tab_name(self, sheet: Sheet | str) -> str:
        key = sheet.value if isinstance(sheet, Sheet) else str(sheet)
        return self.sheet_names.get(key, key)

    def fetch_text(self, sheet: Sheet | str) -> str:
        """Raw CSV body for a sheet. Raises FetchError on any transport problem."""
        tab = self.tab_name(sheet)
        try:
            resp = self.session.get(self.base_url, params={"sheet": tab}, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(tab, None, str(exc)) from exc

        if resp.status_code // 100 != 2:
            raise FetchError(tab, int(resp.status_code), resp.reason or "")

        # The export is UTF-8 but often sent without a charset header
        return resp.content.decode("utf-8-sig", errors="replace")

    def fetch_lines(self, sheet: Sheet | str) -> list[str]:
        """Non-blank lines of a sheet: header first, then data rows.

        Raises EmptyFeedError when there is no header or no data row.
        """
        tab = self.tab_name(sheet)
        lines = split_lines(self.fetch_text(sheet))
        logger.debug("Sheet %s: %d non-blank lines", tab, len(lines))
        if len(lines) < 2:
            raise EmptyFeedError(tab, len(lines))
        return lines

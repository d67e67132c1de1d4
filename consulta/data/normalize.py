"""
Header/cell normalization, alias resolution, enum classification.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from consulta.config import ACCOUNT_TYPE_KEYWORDS, FIELD_ALIASES, MARITAL_STATUS_KEYWORDS
from consulta.data.schemas import AccountType, Field, MaritalStatus
from consulta.data.tokenizer import split_csv_line

_QUOTES = "\"'"


# ---------------------------------------------------------------------------
# Header / cell normalisation
# ---------------------------------------------------------------------------

def normalize_header(cell: str) -> str:
    """Lower-case, trimmed header key without surrounding quotes."""
    return cell.strip().strip(_QUOTES).strip().lower()


def normalize_cell(values: Sequence[str], index: int) -> str:
    """Trimmed cell value at ``index``; '' when the row is shorter than the header."""
    if index >= len(values):
        return ""
    return values[index].strip().strip(_QUOTES).strip()


# ---------------------------------------------------------------------------
# Raw rows
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class RawRow:
    """One data line keyed by normalized header."""
    cells: dict[str, str] = field(default_factory=dict)
    line_number: int = 0

    def get(self, key: str) -> str:
        return self.cells.get(key, "")

    def pick(self, fld: Field) -> str:
        """First non-empty value among the field's header aliases."""
        for alias in FIELD_ALIASES[fld.value]:
            value = self.cells.get(alias, "")
            if value:
                return value
        return ""


def rows_from_lines(lines: Iterable[str]) -> Iterator[RawRow]:
    """Tokenize a header line plus data lines into RawRows.

    Line numbers are 1-based over non-blank lines, header included.
    """
    it = iter(lines)
    try:
        header_line = next(it)
    except StopIteration:
        return
    headers = [normalize_header(h) for h in split_csv_line(header_line)]

    for line_number, line in enumerate(it, start=2):
        if not line.strip():
            continue
        values = split_csv_line(line)
        cells = {header: normalize_cell(values, i) for i, header in enumerate(headers)}
        yield RawRow(cells=cells, line_number=line_number)


# ---------------------------------------------------------------------------
# Enum classification
# ---------------------------------------------------------------------------

def parse_marital_status(value: str) -> MaritalStatus:
    """Map free text ('Casado', 'VIÚVA', 'divorciada') to MaritalStatus."""
    if not value:
        return MaritalStatus.SINGLE
    lowered = value.strip().lower()
    for keyword, status in MARITAL_STATUS_KEYWORDS:
        if keyword in lowered:
            return MaritalStatus(status)
    return MaritalStatus.SINGLE


def parse_account_type(value: str) -> AccountType:
    """'Poupança' / 'poupanca' → Savings; everything else → Checking."""
    if not value:
        return AccountType.CHECKING
    lowered = value.strip().lower()
    for keyword, account_type in ACCOUNT_TYPE_KEYWORDS:
        if keyword in lowered:
            return AccountType(account_type)
    return AccountType.CHECKING

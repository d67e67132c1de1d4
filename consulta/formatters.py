"""
Display helpers for pt-BR money, tax ids and optional dates.
"""
from __future__ import annotations

import datetime as dt
from typing import Optional

from consulta.data.coerce import digits_only


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------

def format_brl(value: float) -> str:
    """1234.5 → 'R$ 1.234,50'; negatives keep the sign in front."""
    text = f"{abs(value):,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"-R$ {text}" if value < 0 else f"R$ {text}"


# ---------------------------------------------------------------------------
# Tax id
# ---------------------------------------------------------------------------

def format_tax_id(tax_id: str) -> str:
    """Mask an 11-digit CPF or 14-digit CNPJ; anything else is returned as-is."""
    d = digits_only(tax_id)
    if len(d) == 11:
        return f"{d[:3]}.{d[3:6]}.{d[6:9]}-{d[9:]}"
    if len(d) == 14:
        return f"{d[:2]}.{d[2:5]}.{d[5:8]}/{d[8:12]}-{d[12:]}"
    return tax_id


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def format_date(value: Optional[dt.date], missing: str = "não informado") -> str:
    """dd/mm/yyyy, or ``missing`` when the sheet value could not be parsed."""
    if value is None:
        return missing
    return value.strftime("%d/%m/%Y")

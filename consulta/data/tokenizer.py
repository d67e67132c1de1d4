"""
Line tokenizer for the spreadsheet CSV export.

Deliberately simpler than RFC 4180: a double quote always toggles quoted
mode and is never emitted, so ``""`` escapes are not understood.
"""
from __future__ import annotations


def split_csv_line(line: str, delimiter: str = ",") -> list[str]:
    """Split one CSV line into raw (untrimmed) field values.

    >>> split_csv_line('Ana,"Rua A, 10",111')
    ['Ana', 'Rua A, 10', '111']
    """
    fields: list[str] = []
    current: list[str] = []
    quoted = False

    for char in line:
        if char == '"':
            quoted = not quoted
        elif char == delimiter and not quoted:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    # Last field has no trailing delimiter
    fields.append("".join(current))
    return fields

"""Exact full-row duplicate detection."""

from typing import Any, Set, Tuple

from .table import Table


def row_key(row) -> Tuple[Tuple[str, Any], ...]:
    """Canonical form of a row: kind and value of every cell, in schema order."""
    return tuple(cell.key() for cell in row)


def count_duplicates(table: Table) -> int:
    """Number of rows repeating an earlier row exactly (first copies not counted)."""
    seen: Set[Tuple[Tuple[str, Any], ...]] = set()
    duplicates = 0

    for row in table.rows:
        key = row_key(row)
        if key in seen:
            duplicates += 1
        else:
            seen.add(key)

    return duplicates

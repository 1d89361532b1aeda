"""
Import/export data models.

Column layout of the customer CSV files and the counters kept while importing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ColumnDef:
    """One column of the customer CSV layout."""

    name: str    # Customer attribute (e.g. "phone")
    label: str   # Header text written on export (e.g. "Phone")


# Field order for both import rows and export lines.
CUSTOMER_COLUMNS: List[ColumnDef] = [
    ColumnDef("phone", "Phone"),
    ColumnDef("name", "Name"),
    ColumnDef("address", "Address"),
    ColumnDef("email", "Email"),
]


@dataclass
class ImportSummary:
    """Line counters for one CSV import run."""

    total: int = 0
    added: int = 0
    updated: int = 0
    skipped: int = 0

    def __str__(self) -> str:
        return (
            f"Total: {self.total} | Added: {self.added} | "
            f"Updated: {self.updated} | Skipped: {self.skipped}"
        )

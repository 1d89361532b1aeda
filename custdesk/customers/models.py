"""Customer record type."""

import sqlite3
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

COLUMNS = ("phone", "name", "address", "email")


@dataclass
class Customer:
    """One customer, identified by a digits-only phone number."""

    phone: str
    name: str
    address: str
    email: Optional[str] = ""

    @classmethod
    def from_row(cls, row: sqlite3.Row) -> "Customer":
        return cls(
            phone=row["phone"],
            name=row["name"],
            address=row["address"],
            email=row["email"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

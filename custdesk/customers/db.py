"""
Customer record access: raw persistence against the customers table.

No content validation happens here; CustomerStore normalizes and validates
before calling in. Every method opens its own connection through the
ConnectionProvider and closes it before returning.
"""

from typing import List, Optional

from custdesk.core.db import ConnectionProvider, apply_schema
from custdesk.core.errors import StorageError
from custdesk.core.logging import get_logger
from custdesk.customers.models import Customer

logger = get_logger("custdesk.customers.db")

_SELECT = "SELECT phone, name, address, email FROM customers"


class CustomerRecords:
    """Insert-if-absent, update, delete, lookup and listing of customer rows."""

    def __init__(self, provider: ConnectionProvider):
        self.provider = provider

    def ensure_schema(self) -> None:
        """Create the customers table if it does not exist yet."""
        with self.provider.acquire() as conn:
            try:
                applied = apply_schema(conn, "customers")
            except OSError as exc:
                raise StorageError(f"Cannot read customers schema: {exc}") from exc
        if not applied:
            raise StorageError("customers/schema.sql is missing")
        logger.debug("customers table ready in %s", self.provider.db_path)

    def insert(self, customer: Customer) -> bool:
        """Insert a new row. False (not an error) when the phone is already stored."""
        with self.provider.acquire() as conn:
            cur = conn.execute(
                "INSERT OR IGNORE INTO customers (phone, name, address, email) "
                "VALUES (?, ?, ?, ?)",
                (customer.phone, customer.name, customer.address, customer.email),
            )
            conn.commit()
            return cur.rowcount > 0

    def update(self, customer: Customer) -> bool:
        """Replace name, address and email for an existing phone."""
        with self.provider.acquire() as conn:
            cur = conn.execute(
                "UPDATE customers SET name = ?, address = ?, email = ? WHERE phone = ?",
                (customer.name, customer.address, customer.email, customer.phone),
            )
            conn.commit()
            return cur.rowcount > 0

    def delete(self, phone: str) -> bool:
        with self.provider.acquire() as conn:
            cur = conn.execute("DELETE FROM customers WHERE phone = ?", (phone,))
            conn.commit()
            return cur.rowcount > 0

    def find(self, phone: str) -> Optional[Customer]:
        """Row for the exact phone key, or None."""
        with self.provider.acquire(readonly=True) as conn:
            row = conn.execute(f"{_SELECT} WHERE phone = ?", (phone,)).fetchone()
        return Customer.from_row(row) if row else None

    def list_all(self) -> List[Customer]:
        """Every row, ordered by name."""
        with self.provider.acquire(readonly=True) as conn:
            rows = conn.execute(f"{_SELECT} ORDER BY name").fetchall()
        return [Customer.from_row(r) for r in rows]

    def count(self) -> int:
        with self.provider.acquire(readonly=True) as conn:
            return conn.execute("SELECT COUNT(*) FROM customers").fetchone()[0]

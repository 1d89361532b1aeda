"""
Customer repository: normalization, validation and CSV bulk exchange.

The only layer that interprets raw input. Writes are rejected before any
storage call unless the normalized record passes every rule in
custdesk.customers.validation.

Per-record operations degrade to a negative result (False, None, []) when
storage fails or the provider has lost its path, so callers cannot tell
"absent" from "unavailable". Each such failure is logged at WARNING.
"""

import re
from pathlib import Path
from typing import List, Optional, Union

from custdesk.core.db import ConnectionProvider
from custdesk.core.errors import CustdeskError
from custdesk.core.logging import get_logger
from custdesk.customers.db import CustomerRecords
from custdesk.customers.models import COLUMNS, Customer
from custdesk.customers.validation import (
    clean,
    email_error,
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    normalize_phone,
    safe,
)
from custdesk.imports.engine import format_csv_line, header_line, iter_lines, parse_csv_line
from custdesk.imports.specs import CUSTOMER_COLUMNS, ImportSummary

logger = get_logger("custdesk.customers.store")

IMPORT_ERROR_PREFIX = "Import error"

PathLike = Union[str, Path]


class CustomerStore:
    """
    Validated access to customer records.

    Usage:
        store = CustomerStore(ConnectionProvider("data/customers.db"))
        store.insert(Customer("555-123-4567", "Ann", "1 Main St"))
        print(store.import_csv("customers.csv"))

    Raises:
        ConfigurationError: the provider has no database path
        StorageError: the customers table could not be created
    """

    # Pure helpers, exposed so presentation code can pre-validate input.
    normalize_phone = staticmethod(normalize_phone)
    is_valid_phone = staticmethod(is_valid_phone)
    is_valid_name = staticmethod(is_valid_name)
    is_valid_address = staticmethod(is_valid_address)
    is_valid_email = staticmethod(is_valid_email)
    email_error = staticmethod(email_error)

    def __init__(self, provider: ConnectionProvider):
        self.records = CustomerRecords(provider)
        self.records.ensure_schema()

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------

    @staticmethod
    def normalized(customer: Customer) -> Customer:
        """Digits-only phone, other fields trimmed with missing treated as empty."""
        return Customer(
            phone=normalize_phone(customer.phone),
            name=clean(customer.name),
            address=clean(customer.address),
            email=clean(customer.email),
        )

    @staticmethod
    def is_valid(customer: Customer) -> bool:
        """All rules on an already-normalized record."""
        return (
            is_valid_phone(customer.phone)
            and is_valid_name(customer.name)
            and is_valid_address(customer.address)
            and email_error(customer.email) is None
        )

    # ------------------------------------------------------------------
    # Record operations
    # ------------------------------------------------------------------

    def insert(self, customer: Customer) -> bool:
        """Add a customer. False if invalid, already stored, or storage failed."""
        record = self.normalized(customer)
        if not self.is_valid(record):
            logger.debug("Rejected insert for phone %r", record.phone)
            return False
        try:
            return self.records.insert(record)
        except CustdeskError as exc:
            logger.warning("Insert of %s failed: %s", record.phone, exc)
            return False

    def update(self, customer: Customer) -> bool:
        """Replace a customer's details. False if invalid, unknown, or storage failed."""
        record = self.normalized(customer)
        if not self.is_valid(record):
            logger.debug("Rejected update for phone %r", record.phone)
            return False
        try:
            return self.records.update(record)
        except CustdeskError as exc:
            logger.warning("Update of %s failed: %s", record.phone, exc)
            return False

    def delete(self, phone_raw: Optional[str]) -> bool:
        phone = normalize_phone(phone_raw)
        try:
            return self.records.delete(phone)
        except CustdeskError as exc:
            logger.warning("Delete of %s failed: %s", phone, exc)
            return False

    def get_by_phone(self, phone_raw: Optional[str]) -> Optional[Customer]:
        phone = normalize_phone(phone_raw)
        try:
            return self.records.find(phone)
        except CustdeskError as exc:
            logger.warning("Lookup of %s failed, reporting not found: %s", phone, exc)
            return None

    def list_all(self) -> List[Customer]:
        try:
            return self.records.list_all()
        except CustdeskError as exc:
            logger.warning("Listing failed, reporting no customers: %s", exc)
            return []

    def search(self, text: Optional[str]) -> List[Customer]:
        """
        Customers with any field matching text, case-insensitively.

        text is a regular expression; if it does not compile it is matched
        literally. Blank text returns the full listing.
        """
        text = clean(text)
        customers = self.list_all()
        if not text:
            return customers

        try:
            pattern = re.compile(text, re.IGNORECASE)
        except re.error:
            pattern = re.compile(re.escape(text), re.IGNORECASE)

        return [
            c for c in customers
            if any(pattern.search(safe(getattr(c, col))) for col in COLUMNS)
        ]

    # ------------------------------------------------------------------
    # CSV bulk exchange
    # ------------------------------------------------------------------

    def import_csv_summary(self, path: PathLike) -> ImportSummary:
        """
        Load a headerless phone,name,address,email file, one record per line.

        Valid rows are inserted, or update the stored record when the phone
        already exists. Each row commits on its own.

        Raises:
            OSError, UnicodeDecodeError: the file could not be read
            StorageError: a row could not be written; earlier rows stay committed
            ConfigurationError: the provider no longer has a database path
        """
        summary = ImportSummary()

        for line in iter_lines(path):
            summary.total += 1
            if not line.strip():
                summary.skipped += 1
                continue

            cols = parse_csv_line(line)
            if len(cols) != len(CUSTOMER_COLUMNS):
                summary.skipped += 1
                continue

            record = self.normalized(Customer(*cols))
            if not self.is_valid(record):
                summary.skipped += 1
                continue

            if self.records.insert(record):
                summary.added += 1
            elif self.records.update(record):
                summary.updated += 1
            else:
                summary.skipped += 1

        logger.info("Imported %s: %s", path, summary)
        return summary

    def import_csv(self, path: PathLike) -> str:
        """Import a CSV file and describe the outcome in one line."""
        try:
            return str(self.import_csv_summary(path))
        except (OSError, UnicodeDecodeError, CustdeskError) as exc:
            logger.error("Import of %s aborted: %s", path, exc)
            return f"{IMPORT_ERROR_PREFIX}: {exc}"

    def load_from_csv(self, path: str) -> str:
        return self.import_csv(Path(path))

    def save_to_csv(self, path: PathLike) -> bool:
        """
        Write every customer, name ordered, under a Phone,Name,Address,Email header.

        Not atomic: a failure part way leaves whatever was written.
        """
        try:
            customers = self.records.list_all()
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(header_line() + "\n")
                for c in customers:
                    f.write(format_csv_line(getattr(c, col.name) for col in CUSTOMER_COLUMNS) + "\n")
        except (OSError, CustdeskError) as exc:
            logger.error("Export to %s failed: %s", path, exc)
            return False

        logger.info("Exported %d customers to %s", len(customers), path)
        return True

"""
Customer records module.

Validated, phone-keyed customer records with CSV bulk import and export.
"""

from custdesk.customers.models import Customer
from custdesk.customers.store import CustomerStore

__all__ = ["Customer", "CustomerStore"]

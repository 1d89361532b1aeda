"""
custdesk core - Shared services for all modules.

Usage:
    from custdesk.core import ConnectionProvider, get_config, get_logger, STORE_PATHS
"""

from custdesk.core.config import get_config, get_config_value, STORE_PATHS
from custdesk.core.db import ConnectionProvider, apply_schema, migrate_all
from custdesk.core.errors import ConfigurationError, CustdeskError, StorageError
from custdesk.core.logging import get_logger

__all__ = [
    "get_config",
    "get_config_value",
    "STORE_PATHS",
    "ConnectionProvider",
    "apply_schema",
    "migrate_all",
    "ConfigurationError",
    "CustdeskError",
    "StorageError",
    "get_logger",
]

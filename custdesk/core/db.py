"""
Database access for custdesk.

Provides connection management and schema application.
Each logical operation acquires its own connection and closes it before
returning; there is no pool and no shared connection state.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

from custdesk.core.errors import ConfigurationError, StorageError
from custdesk.core.logging import get_logger

logger = get_logger("custdesk.db")

_PACKAGE_DIR = Path(__file__).parent.parent

# Modules whose schema.sql is applied by migrate_all, in order.
SCHEMA_ORDER = [
    "customers",
]


class ConnectionProvider:
    """
    Hands out SQLite connections for one configured database file.

    Usage:
        provider = ConnectionProvider("data/customers.db")
        with provider.acquire() as conn:
            conn.execute(...)
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self._db_path = None
        if db_path is not None:
            self.configure(db_path)

    def configure(self, db_path: Union[str, Path]) -> None:
        """Record (or replace) the database file location."""
        self._db_path = str(db_path)

    @property
    def db_path(self) -> Optional[str]:
        return self._db_path

    def _require_path(self) -> str:
        if self._db_path is None or not self._db_path.strip():
            raise ConfigurationError("Database path not set")
        return self._db_path

    @contextmanager
    def acquire(self, readonly: bool = False) -> Generator[sqlite3.Connection, None, None]:
        """
        Context manager for database connections.

        Enables the Row factory and closes the connection on every exit path.
        Engine errors surface as StorageError.

        Args:
            readonly: Open in read-only mode (useful for queries)

        Yields:
            sqlite3.Connection with Row factory enabled

        Raises:
            ConfigurationError: no database path configured
            StorageError: the file could not be opened or a statement failed
        """
        db_path = self._require_path()

        try:
            if readonly:
                uri = f"{Path(db_path).resolve().as_uri()}?mode=ro"
                conn = sqlite3.connect(uri, uri=True)
            else:
                conn = sqlite3.connect(db_path)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database {db_path}: {exc}") from exc

        try:
            conn.row_factory = sqlite3.Row
            yield conn
        except sqlite3.Error as exc:
            raise StorageError(f"Database operation failed: {exc}") from exc
        finally:
            conn.close()


def apply_schema(conn: sqlite3.Connection, module_name: str) -> bool:
    """
    Run <module>/schema.sql against an open connection.

    Returns:
        True if the module ships a schema file, False otherwise
    """
    schema_file = _PACKAGE_DIR / module_name / "schema.sql"
    if not schema_file.exists():
        logger.debug("No schema for module: %s", module_name)
        return False

    sql = schema_file.read_text(encoding="utf-8")
    conn.executescript(sql)
    conn.commit()
    return True


def migrate_all(provider: ConnectionProvider) -> None:
    """
    Apply every module schema in SCHEMA_ORDER.

    Each schema.sql uses CREATE TABLE IF NOT EXISTS,
    making this safe to run repeatedly (idempotent).
    """
    with provider.acquire() as conn:
        for module_name in SCHEMA_ORDER:
            if apply_schema(conn, module_name):
                logger.info("Applied schema: %s/schema.sql", module_name)

    logger.info("All schemas applied to %s", provider.db_path)

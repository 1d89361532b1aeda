"""
Path utilities for custdesk.

Directory creation and database path resolution.
"""

from pathlib import Path
from typing import Optional

from custdesk.core.config import STORE_PATHS


def ensure_directory(path: Path) -> Path:
    """Ensure a directory exists, creating if necessary. Returns path for chaining."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def resolve_db_path(override: Optional[str] = None) -> Path:
    """
    Database file to open: the explicit override if given, else the configured one.

    The parent directory is created so SQLite can create the file on first use.
    """
    if override is not None and override.strip():
        path = Path(override.strip()).expanduser()
    else:
        path = STORE_PATHS.database
    ensure_directory(path.parent)
    return path

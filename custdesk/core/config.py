"""
Configuration management for custdesk.

Loads config.yaml and provides type-safe access to settings.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Optional

# Config file location: lives alongside the custdesk package
_PACKAGE_DIR = Path(__file__).parent.parent.resolve()
DEFAULT_CONFIG_PATH = _PACKAGE_DIR / "config.yaml"
CONFIG_ENV_VAR = "CUSTDESK_CONFIG"

# Cache for loaded config
_config_cache: Optional[Dict[str, Any]] = None


def get_config_path() -> Path:
    """Config file to load: $CUSTDESK_CONFIG when set, else the packaged config.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(override) if override else DEFAULT_CONFIG_PATH


def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Load configuration from config.yaml.

    Args:
        reload: Force reload even if cached

    Returns:
        Configuration dictionary
    """
    global _config_cache

    if _config_cache is not None and not reload:
        return _config_cache

    config_path = get_config_path()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        _config_cache = yaml.safe_load(f) or {}

    return _config_cache


def get_config_value(*keys: str, default: Any = None) -> Any:
    """
    Get a nested config value safely.

    Args:
        *keys: Path of keys to traverse (e.g., 'destinations', 'database')
        default: Value to return if key not found

    Example:
        db_path = get_config_value('destinations', 'database', default='data/customers.db')
    """
    config = get_config()

    for key in keys:
        if isinstance(config, dict) and key in config:
            config = config[key]
        else:
            return default

    return config


class StorePaths:
    """
    Centralized path access for custdesk.

    Usage:
        from custdesk.core.config import STORE_PATHS
        db = STORE_PATHS.database
    """

    def __init__(self):
        self._config = None

    def _ensure_config(self):
        if self._config is None:
            self._config = get_config()

    def reset(self):
        """Forget the loaded config so the next access re-reads it."""
        self._config = None

    def _resolve(self, raw: str) -> Path:
        """Resolve a path: if relative, resolve against _PACKAGE_DIR."""
        p = Path(raw).expanduser()
        if not p.is_absolute():
            p = _PACKAGE_DIR / p
        return p

    @property
    def database(self) -> Path:
        self._ensure_config()
        raw = (self._config.get("destinations") or {}).get("database", "data/customers.db")
        return self._resolve(raw)

    @property
    def config_dir(self) -> Path:
        return get_config_path().parent

    @property
    def root(self) -> Path:
        return _PACKAGE_DIR


# Singleton instance
STORE_PATHS = StorePaths()

"""
Exception types shared across custdesk.
"""


class CustdeskError(Exception):
    """Base class for custdesk failures."""


class ConfigurationError(CustdeskError):
    """The customer database location is missing or blank."""


class StorageError(CustdeskError):
    """The SQLite engine or the underlying file failed."""

"""
Shared test fixtures for custdesk.

Provides a temporary SQLite database file, a connection provider and
repository bound to it, a CSV writer helper, a CLI runner, and a
temporary config.yaml override.
"""

import pytest

from custdesk.core.db import ConnectionProvider
from custdesk.customers.models import Customer
from custdesk.customers.store import CustomerStore


@pytest.fixture
def db_path(tmp_path):
    """Path of a not-yet-created database file."""
    return tmp_path / "customers.db"


@pytest.fixture
def provider(db_path):
    return ConnectionProvider(db_path)


@pytest.fixture
def store(provider):
    """Repository over a fresh database with the customers table created."""
    return CustomerStore(provider)


@pytest.fixture
def seed_customers(store):
    """Two stored customers, inserted out of name order."""
    bob = Customer("5551112222", "Bob", "2 Oak Ave", "bob@example.com")
    alice = Customer("5553334444", "Alice", "1 Main St", "")
    assert store.insert(bob)
    assert store.insert(alice)
    return [alice, bob]


@pytest.fixture
def write_csv(tmp_path):
    """Write lines to a CSV file under tmp_path and return its path."""

    def _write(lines, name="import.csv"):
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def custom_config(tmp_path, monkeypatch):
    """Point CUSTDESK_CONFIG at a temporary YAML file and restore caches afterwards."""
    from custdesk.core.config import STORE_PATHS, get_config

    path = tmp_path / "custdesk.yaml"
    path.write_text(
        "destinations:\n  database: " + str(tmp_path / "alt.db") + "\n"
        "export:\n  default_filename: out.csv\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("CUSTDESK_CONFIG", str(path))
    get_config(reload=True)
    STORE_PATHS.reset()
    yield path
    monkeypatch.delenv("CUSTDESK_CONFIG")
    get_config(reload=True)
    STORE_PATHS.reset()

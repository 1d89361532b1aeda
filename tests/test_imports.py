"""Smoke-test that all public APIs can be imported without error.

Catches stale imports, circular dependencies, and missing deps.
No DB or fixtures needed: pure import checks.
"""


def test_import_custdesk():
    import custdesk
    assert custdesk.__version__ == "0.1.0"


def test_import_core():
    from custdesk.core import (  # noqa: F401
        ConnectionProvider, ConfigurationError, StorageError, CustdeskError,
        get_config, get_config_value, get_logger, STORE_PATHS, migrate_all, apply_schema,
    )


def test_import_customers():
    from custdesk.customers import Customer, CustomerStore  # noqa: F401
    from custdesk.customers.db import CustomerRecords  # noqa: F401


def test_import_validation():
    from custdesk.customers.validation import (  # noqa: F401
        normalize_phone, is_valid_phone, is_valid_name, is_valid_address,
        is_valid_email, email_error, validation_errors,
    )


def test_import_imports():
    from custdesk.imports import ImportSummary, ColumnDef, CUSTOMER_COLUMNS  # noqa: F401
    from custdesk.imports.engine import parse_csv_line, csv_field, format_csv_line  # noqa: F401


def test_import_cli_main():
    from custdesk.cli.main import app, main  # noqa: F401


def test_import_core_output():
    from custdesk.core.output import format_result, format_table, OutputFormat  # noqa: F401


def test_import_core_paths():
    from custdesk.core.paths import ensure_directory, resolve_db_path  # noqa: F401


def test_errors_hierarchy():
    from custdesk.core.errors import ConfigurationError, CustdeskError, StorageError

    assert issubclass(ConfigurationError, CustdeskError)
    assert issubclass(StorageError, CustdeskError)

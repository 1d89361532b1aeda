"""
custdesk CLI - Main Entry Point

Unified Typer CLI that assembles the module sub-commands.

Usage:
    custdesk version
    custdesk init [--db PATH]
    custdesk customers [command]
"""

from typing import Optional

import typer

import custdesk
from custdesk.customers.cli import app as customers_app

app = typer.Typer(
    name="custdesk",
    help="Customer records desk: local customer records with CSV import and export.",
    no_args_is_help=True,
)

app.add_typer(customers_app, name="customers", help="Customer records, import & export")


@app.command()
def version():
    """Show custdesk version."""
    typer.echo(f"custdesk {custdesk.__version__}")


@app.command()
def init(
    db: Optional[str] = typer.Option(
        None, "--db", envvar="CUSTDESK_DB", help="SQLite database file (default: from config.yaml)"
    ),
):
    """Create the database file and its tables."""
    from custdesk.core import ConnectionProvider, CustdeskError, migrate_all
    from custdesk.core.paths import resolve_db_path

    try:
        path = resolve_db_path(db)
        migrate_all(ConnectionProvider(path))
    except (CustdeskError, OSError) as exc:
        typer.echo(f"Database setup failed: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Database ready: {path}")


def main():
    """Entry point for the custdesk CLI."""
    app()


if __name__ == "__main__":
    main()

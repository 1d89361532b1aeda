"""
Customer CLI commands.

Usage:
    custdesk customers list [--search TEXT]
    custdesk customers add <phone> <name> <address> [--email]
    custdesk customers import <file.csv>
    custdesk customers export [file.csv]
"""

from typing import Optional

import typer

from custdesk.core.output import OutputFormat

app = typer.Typer(no_args_is_help=True)


@app.callback()
def customers(
    ctx: typer.Context,
    db: Optional[str] = typer.Option(
        None, "--db", envvar="CUSTDESK_DB", help="SQLite database file (default: from config.yaml)"
    ),
):
    """Customer records stored in a local SQLite file."""
    ctx.obj = {"db": db}


def _open_store(ctx: typer.Context):
    """Build the repository for the selected database, exiting on a fatal startup error."""
    from custdesk.core import ConnectionProvider, CustdeskError
    from custdesk.core.paths import resolve_db_path
    from custdesk.customers.store import CustomerStore

    db = (ctx.obj or {}).get("db")
    try:
        return CustomerStore(ConnectionProvider(resolve_db_path(db)))
    except (CustdeskError, OSError) as exc:
        typer.echo(f"Cannot open customer database: {exc}", err=True)
        raise typer.Exit(1)


def _check_fields(phone: str, name: str, address: str, email: str) -> None:
    from custdesk.customers.validation import validation_errors

    errors = validation_errors(phone, name, address, email)
    if errors:
        for err in errors:
            typer.echo(err, err=True)
        raise typer.Exit(1)


@app.command("add")
def add(
    ctx: typer.Context,
    phone: str = typer.Argument(..., help="Phone number, punctuation allowed"),
    name: str = typer.Argument(..., help="Customer name"),
    address: str = typer.Argument(..., help="Postal address"),
    email: str = typer.Option("", "--email", "-e", help="Email address (optional)"),
):
    """Add a new customer."""
    from custdesk.customers.models import Customer
    from custdesk.customers.validation import clean, normalize_phone

    store = _open_store(ctx)
    phone, name, address, email = normalize_phone(phone), clean(name), clean(address), clean(email)
    _check_fields(phone, name, address, email)

    if store.get_by_phone(phone) is not None:
        typer.echo("Phone already exists.", err=True)
        raise typer.Exit(1)
    if not store.insert(Customer(phone, name, address, email)):
        typer.echo("Insert failed.", err=True)
        raise typer.Exit(1)
    typer.echo(f"Added {phone} | {name}")


@app.command("update")
def update(
    ctx: typer.Context,
    phone: str = typer.Argument(..., help="Phone number of the customer to edit"),
    name: str = typer.Argument(..., help="New name"),
    address: str = typer.Argument(..., help="New address"),
    email: str = typer.Option("", "--email", "-e", help="New email (empty clears it)"),
):
    """Replace a customer's name, address and email."""
    from custdesk.customers.models import Customer
    from custdesk.customers.validation import clean, normalize_phone

    store = _open_store(ctx)
    phone, name, address, email = normalize_phone(phone), clean(name), clean(address), clean(email)
    _check_fields(phone, name, address, email)

    if not store.update(Customer(phone, name, address, email)):
        typer.echo("Update failed.", err=True)
        raise typer.Exit(1)
    typer.echo(f"Updated {phone} | {name}")


@app.command("delete")
def delete(
    ctx: typer.Context,
    phone: str = typer.Argument(..., help="Phone number of the customer to remove"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
):
    """Delete a customer."""
    from custdesk.customers.validation import normalize_phone

    store = _open_store(ctx)
    phone = normalize_phone(phone)
    if not yes:
        typer.confirm(f"Delete {phone}?", abort=True)

    if not store.delete(phone):
        typer.echo(f"Delete failed {phone}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Deleted {phone}")


@app.command("show")
def show(
    ctx: typer.Context,
    phone: str = typer.Argument(..., help="Phone number"),
    fmt: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
):
    """Show one customer."""
    from custdesk.core.output import format_result

    store = _open_store(ctx)
    customer = store.get_by_phone(phone)
    if customer is None:
        typer.echo(f"Customer {phone} not found.")
        raise typer.Exit(1)
    typer.echo(format_result(customer, fmt))


@app.command("list")
def list_customers(
    ctx: typer.Context,
    search: str = typer.Option("", "--search", "-s", help="Case-insensitive pattern matched against every field"),
    fmt: OutputFormat = typer.Option(OutputFormat.HUMAN, "--format", "-f", help="Output format"),
):
    """List customers ordered by name."""
    from custdesk.core.output import format_table
    from custdesk.customers.models import COLUMNS

    store = _open_store(ctx)
    rows = store.search(search)

    if not rows and fmt != OutputFormat.JSON:
        typer.echo("No customers found.")
        raise typer.Exit()

    typer.echo(format_table(rows, COLUMNS, fmt))
    if fmt == OutputFormat.HUMAN:
        typer.echo(f"\nrows={len(rows)}")


@app.command("import")
def import_file(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Headerless CSV: phone,name,address,email"),
):
    """Add or update customers from a CSV file."""
    from custdesk.customers.store import IMPORT_ERROR_PREFIX

    store = _open_store(ctx)
    message = store.load_from_csv(path)
    typer.echo(message)
    if message.startswith(IMPORT_ERROR_PREFIX):
        raise typer.Exit(1)


@app.command("export")
def export_file(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help="Destination CSV (default: export.default_filename)"),
):
    """Write every customer to a CSV file."""
    from custdesk.core.config import get_config_value

    store = _open_store(ctx)
    if path is None:
        path = get_config_value("export", "default_filename", default="backup.csv")

    if not store.save_to_csv(path):
        typer.echo("Export failed", err=True)
        raise typer.Exit(1)
    typer.echo(f"Export OK\nPath: {path}")

"""
custdesk - Customer records desk

Local customer record keeping on a single SQLite file.

Modules:
    core        - Shared services (db, config, logging, paths, output)
    customers   - Customer records, validation, repository and CLI
    imports     - CSV line grammar and import summaries
    cli         - Top-level Typer entry point
"""

__version__ = "0.1.0"

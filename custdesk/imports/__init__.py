"""
custdesk import infrastructure: CSV line grammar and import bookkeeping.

Usage:
    from custdesk.imports import ImportSummary, CUSTOMER_COLUMNS
    from custdesk.imports.engine import parse_csv_line, format_csv_line
"""

from custdesk.imports.specs import CUSTOMER_COLUMNS, ColumnDef, ImportSummary

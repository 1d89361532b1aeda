"""
CSV line grammar for customer files.

A deliberately narrow format, kept compatible with files written by earlier
releases rather than with RFC 4180:

- one record per physical line; quoted fields cannot span lines
- on read, every '"' toggles quoting and is dropped; a doubled quote inside
  a quoted field is NOT collapsed to a single '"'
- on write, a field is quoted (interior quotes doubled) only when it
  contains a comma; quotes in a comma-free field are written as-is
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from custdesk.imports.specs import CUSTOMER_COLUMNS


def parse_csv_line(line: str) -> List[str]:
    """Split one line into fields. The trailing field is always emitted, even if empty."""
    fields: List[str] = []
    current: List[str] = []
    quoted = False

    for ch in line:
        if ch == '"':
            quoted = not quoted
        elif ch == "," and not quoted:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)

    fields.append("".join(current))
    return fields


def csv_field(value: Optional[str]) -> str:
    """Render one field for export."""
    if value is None:
        return ""
    if "," in value:
        return '"' + value.replace('"', '""') + '"'
    return value


def format_csv_line(values: Iterable[Optional[str]]) -> str:
    return ",".join(csv_field(v) for v in values)


def header_line() -> str:
    """Export header: Phone,Name,Address,Email."""
    return ",".join(col.label for col in CUSTOMER_COLUMNS)


def iter_lines(path: Union[str, Path]) -> Iterator[str]:
    """
    Yield the physical lines of a UTF-8 text file without line terminators.

    Raises OSError / UnicodeDecodeError from the underlying read.
    """
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            yield line.rstrip("\n")

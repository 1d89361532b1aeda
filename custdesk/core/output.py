"""
Output formatters for CLI display.

Supports human-readable, JSON, and markdown output modes.
"""

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class OutputFormat(str, Enum):
    HUMAN = "human"
    JSON = "json"
    MARKDOWN = "markdown"


def format_result(
    result: Any,
    fmt: OutputFormat = OutputFormat.HUMAN,
    title: Optional[str] = None,
) -> str:
    """Format a single record or summary for display."""
    if fmt == OutputFormat.JSON:
        return json.dumps(_to_dict(result), indent=2, default=str)
    elif fmt == OutputFormat.MARKDOWN:
        return _format_markdown(result, title)
    else:
        return _format_human(result, title)


def format_table(
    rows: Sequence[Any],
    columns: Sequence[str],
    fmt: OutputFormat = OutputFormat.HUMAN,
) -> str:
    """Format a list of records as a table, one row per record."""
    data = [_to_dict(r) for r in rows]

    if fmt == OutputFormat.JSON:
        return json.dumps(data, indent=2, default=str)

    labels = [c.replace("_", " ").title() for c in columns]
    cells = [[_cell(d.get(c)) for c in columns] for d in data]

    if fmt == OutputFormat.MARKDOWN:
        lines = [
            "| " + " | ".join(labels) + " |",
            "|" + "|".join("---" for _ in labels) + "|",
        ]
        lines.extend("| " + " | ".join(row) + " |" for row in cells)
        return "\n".join(lines)

    widths = [
        max([len(label)] + [len(row[i]) for row in cells])
        for i, label in enumerate(labels)
    ]
    lines = [
        "  ".join(label.ljust(w) for label, w in zip(labels, widths)).rstrip(),
        "-" * (sum(widths) + 2 * (len(widths) - 1)),
    ]
    for row in cells:
        lines.append("  ".join(v.ljust(w) for v, w in zip(row, widths)).rstrip())
    return "\n".join(lines)


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def _to_dict(result: Any) -> Dict:
    if is_dataclass(result):
        return asdict(result)
    elif isinstance(result, dict):
        return result
    elif hasattr(result, "__dict__"):
        return result.__dict__
    return {"value": str(result)}


def _format_human(result: Any, title: Optional[str] = None) -> str:
    lines: List[str] = []
    if title:
        lines.extend([title, "=" * len(title), ""])

    data = _to_dict(result)
    max_key_len = max(len(str(k)) for k in data.keys()) if data else 0

    for key, value in data.items():
        label = key.replace("_", " ").title()
        lines.append(f"{label:<{max_key_len + 2}}: {_cell(value) or '-'}")

    return "\n".join(lines)


def _format_markdown(result: Any, title: Optional[str] = None) -> str:
    lines: List[str] = []
    if title:
        lines.extend([f"# {title}", ""])

    data = _to_dict(result)
    lines.extend(["| Field | Value |", "|-------|-------|"])

    for key, value in data.items():
        label = key.replace("_", " ").title()
        lines.append(f"| {label} | {_cell(value) or '-'} |")

    return "\n".join(lines)

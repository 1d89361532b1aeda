"""Tests for CLI output formatters."""

import json

from custdesk.core.output import OutputFormat, format_result, format_table
from custdesk.customers.models import COLUMNS, Customer
from custdesk.imports.specs import ImportSummary

ANN = Customer("5551234567", "Ann", "1 Main St", "")
BOB = Customer("5551112222", "Bob", "2 Oak Ave", "bob@example.com")


def test_human_result_with_title():
    text = format_result(ANN, OutputFormat.HUMAN, title="Customer")
    lines = text.splitlines()
    assert lines[0] == "Customer"
    assert lines[1] == "========"
    assert any(line.startswith("Phone") and "5551234567" in line for line in lines)


def test_human_result_blank_email_shown_as_dash():
    text = format_result(ANN)
    email_line = [line for line in text.splitlines() if line.startswith("Email")][0]
    assert email_line.endswith("-")


def test_json_result():
    assert json.loads(format_result(ImportSummary(3, 1, 1, 1), OutputFormat.JSON)) == {
        "total": 3, "added": 1, "updated": 1, "skipped": 1,
    }


def test_markdown_result():
    text = format_result(BOB, OutputFormat.MARKDOWN, title="Bob")
    assert text.startswith("# Bob")
    assert "| Email | bob@example.com |" in text


def test_human_table_aligned():
    text = format_table([ANN, BOB], COLUMNS)
    lines = text.splitlines()
    assert lines[0].split() == ["Phone", "Name", "Address", "Email"]
    assert set(lines[1]) == {"-"}
    assert lines[2].startswith("5551234567  Ann")


def test_markdown_table():
    text = format_table([BOB], COLUMNS, OutputFormat.MARKDOWN)
    assert text.splitlines()[0] == "| Phone | Name | Address | Email |"
    assert "| 5551112222 | Bob | 2 Oak Ave | bob@example.com |" in text


def test_json_table_empty():
    assert format_table([], COLUMNS, OutputFormat.JSON) == "[]"

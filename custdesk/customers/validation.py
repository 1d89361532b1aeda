"""
Normalization and validation rules for customer input.

Pure functions, no database access. The CLI calls these directly to
pre-validate form input before attempting a write.
"""

import re
from typing import List, Optional

PHONE_MIN_DIGITS = 7
PHONE_MAX_DIGITS = 11

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
EMAIL_ERROR = "Invalid email. Use format name@example.com."
PHONE_ERROR = f"Phone must be {PHONE_MIN_DIGITS}-{PHONE_MAX_DIGITS} digits."

_NON_DIGITS = re.compile(r"[^0-9]")


def safe(value: Optional[str]) -> str:
    return "" if value is None else value


def clean(value: Optional[str]) -> str:
    """Missing becomes empty, then surrounding whitespace is trimmed."""
    return safe(value).strip()


def normalize_phone(raw: Optional[str]) -> str:
    """Digits only. "(555) 123-4567" and "555.123.4567" both give "5551234567"."""
    if raw is None:
        return ""
    return _NON_DIGITS.sub("", raw)


def is_valid_phone(phone: Optional[str]) -> bool:
    """Length check on an already-normalized phone."""
    return phone is not None and PHONE_MIN_DIGITS <= len(phone) <= PHONE_MAX_DIGITS


def is_valid_name(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def is_valid_address(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def is_valid_email(value: Optional[str]) -> bool:
    """Email is optional: empty or blank passes."""
    if value is None or not value.strip():
        return True
    return EMAIL_PATTERN.fullmatch(value) is not None


def email_error(value: Optional[str]) -> Optional[str]:
    """None when the email is empty or well formed, else a message for the user."""
    if value is None or not value.strip():
        return None
    if not is_valid_email(value):
        return EMAIL_ERROR
    return None


def validation_errors(phone: str, name: str, address: str, email: str) -> List[str]:
    """
    Every rule the normalized fields break, as user-facing messages.

    Empty list means the record may be written.
    """
    errors = []
    if not is_valid_phone(phone):
        errors.append(PHONE_ERROR)
    if not is_valid_name(name):
        errors.append("Name is required.")
    if not is_valid_address(address):
        errors.append("Address is required.")
    err = email_error(email)
    if err:
        errors.append(err)
    return errors

"""Display formatting for phone numbers, money and dates."""

from __future__ import annotations

import re
from datetime import date, datetime

E164_US_PATTERN = re.compile(r"^\+1\d{10}$")
_NON_DIGITS = re.compile(r"\D")


def format_phone_number(phone: str | None) -> str | None:
    """Normalise a US phone number to ``+1XXXXXXXXXX``.

    Ten digits get a ``+1`` prefix, eleven digits starting with ``1`` get a
    ``+``. Anything else is returned unchanged.
    """
    if not phone:
        return phone
    digits = _NON_DIGITS.sub("", phone)
    if len(digits) == 10:
        return f"+1{digits}"
    if len(digits) == 11 and digits.startswith("1"):
        return f"+{digits}"
    return phone


def is_valid_phone_number(phone: str | None) -> bool:
    return bool(phone) and E164_US_PATTERN.match(phone) is not None


def format_phone_for_display(phone: str | None) -> str | None:
    """Render ``+1XXXXXXXXXX`` as ``+1 (XXX) XXX-XXXX``."""
    if not phone or not is_valid_phone_number(phone):
        return phone
    digits = phone[2:]
    return f"+1 ({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def format_currency(value: float | int | None) -> str:
    amount = float(value or 0)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def format_date(value: date | datetime | str | None) -> str:
    """US short date, ``M/D/YYYY``. ISO strings are parsed first."""
    if value is None or value == "":
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value.month}/{value.day}/{value.year}"

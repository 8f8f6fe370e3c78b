"""Deterministic validators and sanitizers used by the service layer."""

from __future__ import annotations

import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from lawnboss.core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
CENTS = Decimal("0.01")


def sanitize_text(value: str | None, max_len: int = 20000) -> str:
    """Sanitize free-form content before persistence/display."""
    if value is None:
        return ""
    cleaned = str(value).replace("\x00", "").strip()
    return cleaned[:max_len]


def clean_optional(value: str | None) -> str | None:
    cleaned = sanitize_text(value)
    return cleaned or None


def is_valid_email(value: str | None) -> bool:
    return bool(value) and EMAIL_PATTERN.match(value.strip()) is not None


def require_fields(payload: Mapping[str, Any], fields: tuple[str, ...], message: str | None = None) -> None:
    """Raise ValidationError when any of ``fields`` is missing or blank."""
    missing = [
        name for name in fields if payload.get(name) is None or (isinstance(payload.get(name), str) and not payload[name].strip())
    ]
    if missing:
        raise ValidationError(message or f"Missing required fields: {', '.join(missing)}")


def optional_number(value: Any, field_name: str) -> float | None:
    """Blank strings and None become None; anything else must parse as a number."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} must be a number") from exc


def round_money(value: float | int | None) -> float:
    """Round half-up to cents."""
    return float(Decimal(str(value or 0)).quantize(CENTS, rounding=ROUND_HALF_UP))

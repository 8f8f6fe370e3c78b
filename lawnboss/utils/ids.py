"""Identifier helpers."""

from __future__ import annotations

import time
import uuid


def new_id() -> str:
    """Return a new UUID4 primary key as a string."""
    return str(uuid.uuid4())


def generate_invoice_number(now_ms: int | None = None) -> str:
    """Invoice numbers are ``INV-`` followed by the epoch time in milliseconds."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"INV-{now_ms}"

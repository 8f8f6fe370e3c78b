"""Structured log payload helpers for function invocations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
import uuid


@dataclass(frozen=True)
class LogContext:
    """Normalized context fields expected in structured logs."""

    function_name: str | None = None
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex)
    user_id: str | None = None
    entity_type: str | None = None
    entity_id: str | None = None


def build_log_event(event: str, context: LogContext, **fields: Any) -> dict[str, Any]:
    """Build a normalized structured log payload."""
    payload: dict[str, Any] = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "function_name": context.function_name,
        "request_id": context.request_id,
        "user_id": context.user_id,
        "entity_type": context.entity_type,
        "entity_id": context.entity_id,
    }
    payload.update(fields)
    return payload

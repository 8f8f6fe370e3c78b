"""Request body parsing for the HTTP functions."""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from lawnboss.core.exceptions import ValidationError


async def read_json_object(request: Request) -> dict[str, Any]:
    """Parse the body as a JSON object or raise ValidationError."""
    raw = await request.body()
    try:
        payload = json.loads(raw or b"null")
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValidationError("Request body must be a JSON object") from exc
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload

"""Common schema module."""

from __future__ import annotations

from pydantic import BaseModel


class ErrorEnvelope(BaseModel):
    """Error body returned by the HTTP functions."""

    error: str
    details: str | None = None

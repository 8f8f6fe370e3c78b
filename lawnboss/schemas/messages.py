"""Message audit trail and change feed schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MessageRecipientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    recipient_name: str
    recipient_email: str | None = None
    recipient_phone: str | None = None
    status: str
    sent_at: datetime | None = None
    error_message: str | None = None


class MessageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    type: str
    subject: str | None = None
    content: str
    sent_by: str | None = None
    status: str
    metadata: dict[str, Any] | None = Field(default=None, validation_alias="meta")
    created_at: datetime | None = None
    recipients: list[MessageRecipientResponse] = []


class ChangeEventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    version: int
    table: str
    event: str
    record_id: str | None = None
    occurred_at: datetime

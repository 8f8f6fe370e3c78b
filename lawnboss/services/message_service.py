"""Outbound message audit trail."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from sqlalchemy.orm import selectinload

from lawnboss.core.enums import MessageStatus
from lawnboss.models import Customer, Message, MessageRecipient
from lawnboss.services.base_service import BaseService


class MessageService(BaseService):
    """Reads and writes for messages and their recipients."""

    def list_messages(self, limit: int = 100, offset: int = 0) -> list[Message]:
        return (
            self.db.query(Message)
            .options(selectinload(Message.recipients))
            .order_by(Message.created_at.desc())
            .offset(offset)
            .limit(limit)
            .all()
        )

    def stage_sent_message(
        self,
        *,
        message_type: str,
        subject: str,
        content: str,
        customer: Customer,
        sent_by: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Message:
        """Add a sent message and its recipient to the session without committing.

        Callers own the transaction so the audit rows land together with
        whatever state change the message reports.
        """
        message = Message(
            type=message_type,
            subject=subject,
            content=content,
            sent_by=sent_by,
            status=MessageStatus.SENT.value,
            meta=metadata or {},
        )
        message.recipients.append(
            MessageRecipient(
                customer_id=customer.id,
                recipient_name=customer.full_name,
                recipient_email=customer.email,
                recipient_phone=customer.phone,
                status=MessageStatus.SENT.value,
                sent_at=datetime.now(timezone.utc),
            )
        )
        self.db.add(message)
        return message

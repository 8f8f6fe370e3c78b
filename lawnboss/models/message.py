"""Outbound message audit trail."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import MessageStatus
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin


class Message(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "messages"

    type: Mapped[str] = mapped_column(String(32), nullable=False)
    subject: Mapped[str | None] = mapped_column(String(500))
    content: Mapped[str] = mapped_column(Text, nullable=False)
    sent_by: Mapped[str | None] = mapped_column(String(64))
    status: Mapped[str] = mapped_column(String(32), default=MessageStatus.PENDING.value, nullable=False)
    # "metadata" is reserved on declarative classes.
    meta: Mapped[dict[str, Any] | None] = mapped_column("metadata", JSON)

    recipients = relationship("MessageRecipient", back_populates="message", cascade="all, delete-orphan")


class MessageRecipient(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "message_recipients"

    message_id: Mapped[str] = mapped_column(ForeignKey("messages.id", ondelete="CASCADE"), nullable=False, index=True)
    customer_id: Mapped[str] = mapped_column(ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True)
    recipient_name: Mapped[str] = mapped_column(String(255), nullable=False)
    recipient_email: Mapped[str | None] = mapped_column(String(320))
    recipient_phone: Mapped[str | None] = mapped_column(String(32))
    status: Mapped[str] = mapped_column(String(32), default=MessageStatus.PENDING.value, nullable=False)
    sent_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    error_message: Mapped[str | None] = mapped_column(Text)

    message = relationship("Message", back_populates="recipients")
    customer = relationship("Customer")

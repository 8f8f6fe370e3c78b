"""Invoice and invoice item models."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import InvoiceStatus
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin

Money = Numeric(12, 2, asdecimal=False)


class Invoice(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "invoices"
    __table_args__ = (Index("idx_invoices_status", "status"),)

    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    property_id: Mapped[str | None] = mapped_column(ForeignKey("properties.id", ondelete="SET NULL"))
    service_schedule_id: Mapped[str | None] = mapped_column(
        ForeignKey("service_schedules.id", ondelete="SET NULL")
    )
    invoice_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    invoice_date: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False)
    subtotal: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    tax_amount: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    total: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    amount_paid: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    balance: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=InvoiceStatus.DRAFT.value, nullable=False)
    payment_date: Mapped[date | None] = mapped_column(Date)
    payment_method: Mapped[str | None] = mapped_column(String(32))
    notes: Mapped[str | None] = mapped_column(Text)

    customer = relationship("Customer")
    property = relationship("Property")
    service_schedule = relationship("ServiceSchedule")
    items = relationship(
        "InvoiceItem",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="InvoiceItem.created_at",
    )


class InvoiceItem(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "invoice_items"

    invoice_id: Mapped[str] = mapped_column(ForeignKey("invoices.id", ondelete="CASCADE"), nullable=False, index=True)
    service_schedule_id: Mapped[str | None] = mapped_column(
        ForeignKey("service_schedules.id", ondelete="SET NULL")
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=1, nullable=False)
    unit_price: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    tax_rate: Mapped[float] = mapped_column(Numeric(6, 4, asdecimal=False), default=0, nullable=False)
    tax_amount: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    subtotal: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    total: Mapped[float] = mapped_column(Money, default=0, nullable=False)

    invoice = relationship("Invoice", back_populates="items")
    service_schedule = relationship("ServiceSchedule")

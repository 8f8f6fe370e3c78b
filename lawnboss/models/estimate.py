"""Estimate and estimate item models."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Date, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import EstimateStatus
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin
from lawnboss.models.invoice import Money


class Estimate(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "estimates"

    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    property_id: Mapped[str | None] = mapped_column(ForeignKey("properties.id", ondelete="SET NULL"))
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    valid_until: Mapped[date | None] = mapped_column(Date)
    notes: Mapped[str | None] = mapped_column(Text)
    subtotal: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    tax_amount: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    total_amount: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=EstimateStatus.DRAFT.value, nullable=False)

    customer = relationship("Customer")
    property = relationship("Property")
    items = relationship(
        "EstimateItem",
        back_populates="estimate",
        cascade="all, delete-orphan",
        order_by="EstimateItem.created_at",
    )


class EstimateItem(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "estimate_items"

    estimate_id: Mapped[str] = mapped_column(
        ForeignKey("estimates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_type_id: Mapped[str | None] = mapped_column(ForeignKey("service_types.id", ondelete="SET NULL"))
    description: Mapped[str] = mapped_column(Text, nullable=False)
    quantity: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), default=1, nullable=False)
    unit_price: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    tax_rate: Mapped[float] = mapped_column(Numeric(6, 4, asdecimal=False), default=0, nullable=False)
    tax_amount: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    subtotal: Mapped[float] = mapped_column(Money, default=0, nullable=False)
    total: Mapped[float] = mapped_column(Money, default=0, nullable=False)

    estimate = relationship("Estimate", back_populates="items")
    service_type = relationship("ServiceType")

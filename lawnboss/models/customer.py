"""Customer and property models."""

from __future__ import annotations

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import RecordStatus
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin


class Customer(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "customers"
    __table_args__ = (Index("idx_customers_status", "status"),)

    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(32))
    company_name: Mapped[str | None] = mapped_column(String(255))
    billing_address: Mapped[str | None] = mapped_column(String(255))
    billing_city: Mapped[str | None] = mapped_column(String(120))
    billing_state: Mapped[str | None] = mapped_column(String(64))
    billing_zip: Mapped[str | None] = mapped_column(String(20))
    payment_terms: Mapped[int] = mapped_column(Integer, default=30, nullable=False)
    tax_exempt: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=RecordStatus.ACTIVE.value, nullable=False)
    referral_source: Mapped[str | None] = mapped_column(String(255))
    notes: Mapped[str | None] = mapped_column(Text)

    properties = relationship("Property", back_populates="customer", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class Property(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "properties"

    customer_id: Mapped[str] = mapped_column(
        ForeignKey("customers.id", ondelete="CASCADE"), nullable=False, index=True
    )
    address_line1: Mapped[str] = mapped_column(String(255), nullable=False)
    address_line2: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(120), nullable=False)
    state: Mapped[str] = mapped_column(String(64), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    property_size: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))
    lawn_size: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))
    has_irrigation: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    has_pets: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)

    customer = relationship("Customer", back_populates="properties")
    service_schedules = relationship("ServiceSchedule", back_populates="property")

"""Tax configuration model."""

from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin


class TaxConfiguration(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "tax_configurations"
    __table_args__ = (CheckConstraint("rate >= 0 AND rate <= 1", name="ck_tax_configurations_rate"),)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    rate: Mapped[float] = mapped_column(Numeric(6, 4, asdecimal=False), nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

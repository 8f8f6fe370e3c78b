"""Service type and service schedule models."""

from __future__ import annotations

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import ServiceStatus, TimeWindow, UnitType
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin


class ServiceType(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "service_types"

    name: Mapped[str] = mapped_column(String(120), nullable=False, unique=True)
    label: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    base_price: Mapped[float] = mapped_column(Numeric(12, 2, asdecimal=False), default=0, nullable=False)
    tax_rate: Mapped[float] = mapped_column(Numeric(6, 4, asdecimal=False), default=0, nullable=False)
    unit_type: Mapped[str] = mapped_column(String(32), default=UnitType.FLAT_RATE.value, nullable=False)


class ServiceSchedule(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "service_schedules"
    __table_args__ = (
        Index("idx_service_schedules_date", "scheduled_date"),
        Index("idx_service_schedules_status", "status"),
    )

    property_id: Mapped[str] = mapped_column(
        ForeignKey("properties.id", ondelete="CASCADE"), nullable=False, index=True
    )
    service_type_id: Mapped[str | None] = mapped_column(ForeignKey("service_types.id", ondelete="SET NULL"))
    technician_id: Mapped[str | None] = mapped_column(ForeignKey("technicians.id", ondelete="SET NULL"))
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    scheduled_time_window: Mapped[str] = mapped_column(String(32), default=TimeWindow.MORNING.value, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=ServiceStatus.PENDING.value, nullable=False)
    base_price: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))
    description: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)
    is_recurring: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    recurring_frequency: Mapped[str | None] = mapped_column(String(32))
    recurring_end_date: Mapped[date | None] = mapped_column(Date)
    next_service_date: Mapped[date | None] = mapped_column(Date)

    property = relationship("Property", back_populates="service_schedules")
    service_type = relationship("ServiceType")
    technician = relationship("Technician")
    crew_assignments = relationship("CrewAssignment", back_populates="service_schedule")

"""Crew, crew membership and crew assignment models."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import AssignmentStatus, CrewRole, RecordStatus
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin, utcnow


class Crew(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "crews"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(32), default=RecordStatus.ACTIVE.value, nullable=False)

    members = relationship("CrewMember", back_populates="crew", cascade="all, delete-orphan")
    assignments = relationship("CrewAssignment", back_populates="crew", cascade="all, delete-orphan")


class CrewMember(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "crew_members"

    crew_id: Mapped[str] = mapped_column(ForeignKey("crews.id", ondelete="CASCADE"), nullable=False, index=True)
    technician_id: Mapped[str] = mapped_column(
        ForeignKey("technicians.id", ondelete="CASCADE"), nullable=False, index=True
    )
    role: Mapped[str] = mapped_column(String(32), default=CrewRole.CREW_MEMBER.value, nullable=False)
    is_primary_crew: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    start_date: Mapped[date] = mapped_column(Date, default=date.today, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date)

    crew = relationship("Crew", back_populates="members")
    technician = relationship("Technician", back_populates="crew_memberships")


class CrewAssignment(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "crew_assignments"
    __table_args__ = (
        UniqueConstraint("crew_id", "service_schedule_id", name="uq_crew_assignments_crew_schedule"),
    )

    crew_id: Mapped[str] = mapped_column(ForeignKey("crews.id", ondelete="CASCADE"), nullable=False, index=True)
    service_schedule_id: Mapped[str] = mapped_column(
        ForeignKey("service_schedules.id", ondelete="CASCADE"), nullable=False, index=True
    )
    assigned_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=AssignmentStatus.PENDING.value, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)

    crew = relationship("Crew", back_populates="assignments")
    service_schedule = relationship("ServiceSchedule", back_populates="crew_assignments")

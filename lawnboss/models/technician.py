"""Technician model module."""

from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lawnboss.core.enums import RecordStatus
from lawnboss.models.base import AuditMixin, Base, UUIDPrimaryKeyMixin


class Technician(Base, UUIDPrimaryKeyMixin, AuditMixin):
    __tablename__ = "technicians"

    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    phone: Mapped[str | None] = mapped_column(String(32))
    status: Mapped[str] = mapped_column(String(32), default=RecordStatus.ACTIVE.value, nullable=False)

    crew_memberships = relationship("CrewMember", back_populates="technician")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

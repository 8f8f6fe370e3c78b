"""Technician and service type lookups."""

from __future__ import annotations

from typing import Any

from lawnboss.core.enums import RecordStatus
from lawnboss.core.exceptions import ConflictError, ValidationError
from lawnboss.models import ServiceType, Technician
from lawnboss.services.base_service import BaseService
from lawnboss.utils.formatters import format_phone_number
from lawnboss.utils.validators import clean_optional, is_valid_email, sanitize_text


class TechnicianService(BaseService):
    def list_technicians(self) -> list[Technician]:
        return self.db.query(Technician).order_by(Technician.last_name, Technician.first_name).all()

    def add_technician(self, data: dict[str, Any]) -> Technician:
        email = sanitize_text(data.get("email")).lower()
        if not is_valid_email(email):
            raise ValidationError("A valid email address is required")
        if self.db.query(Technician).filter(Technician.email == email).first() is not None:
            raise ConflictError("A technician with this email already exists")
        technician = Technician(
            first_name=sanitize_text(data.get("first_name")),
            last_name=sanitize_text(data.get("last_name")),
            email=email,
            phone=format_phone_number(clean_optional(data.get("phone"))),
            status=RecordStatus.ACTIVE.value,
        )
        return self.save(technician)


class ServiceTypeService(BaseService):
    def list_service_types(self) -> list[ServiceType]:
        return self.db.query(ServiceType).order_by(ServiceType.name).all()

"""Service schedule creation, listing and recurrence."""

from __future__ import annotations

import calendar
import logging
from datetime import date, timedelta
from typing import Any

from sqlalchemy.orm import joinedload

from lawnboss.core.enums import RecurringFrequency, ServiceStatus, TimeWindow
from lawnboss.core.exceptions import NotFoundError, ValidationError
from lawnboss.models import Property, ServiceSchedule, ServiceType, Technician
from lawnboss.services.base_service import BaseService
from lawnboss.utils.validators import clean_optional

logger = logging.getLogger(__name__)


def add_months(value: date, months: int) -> date:
    """Shift by whole months, clamping to the last day of the target month."""
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def calculate_next_service_date(
    current: date,
    frequency: str | None,
    end_date: date | None = None,
) -> date | None:
    """Next occurrence for a recurring service, or None past ``end_date``.

    Custom recurrences are planned by hand and never get a computed date.
    """
    if frequency == RecurringFrequency.WEEKLY.value:
        next_date = current + timedelta(days=7)
    elif frequency == RecurringFrequency.BIWEEKLY.value:
        next_date = current + timedelta(days=14)
    elif frequency == RecurringFrequency.MONTHLY.value:
        next_date = add_months(current, 1)
    else:
        return None

    if end_date is not None and next_date > end_date:
        return None
    return next_date


class ScheduleService(BaseService):
    """Service for scheduling and listing lawn services."""

    def _with_relations(self):
        return self.db.query(ServiceSchedule).options(
            joinedload(ServiceSchedule.property).joinedload(Property.customer),
            joinedload(ServiceSchedule.service_type),
            joinedload(ServiceSchedule.technician),
        )

    def list_services(self, status: str | None = None) -> list[ServiceSchedule]:
        query = self._with_relations()
        if status:
            query = query.filter(ServiceSchedule.status == status)
        return query.order_by(ServiceSchedule.scheduled_date.asc()).all()

    def get_service(self, service_id: str) -> ServiceSchedule:
        record = self._with_relations().filter(ServiceSchedule.id == service_id).first()
        if record is None:
            raise NotFoundError("Service not found")
        return record

    def _validate(self, data: dict[str, Any]) -> None:
        if not data.get("property_id"):
            raise ValidationError("Property is required")
        if not data.get("scheduled_date"):
            raise ValidationError("Scheduled date is required")
        window = data.get("scheduled_time_window")
        if not window:
            raise ValidationError("Time window is required")
        if window not in {item.value for item in TimeWindow}:
            raise ValidationError(f"Unknown time window: {window}")

        if not data.get("service_type_id"):
            if not clean_optional(data.get("description")):
                raise ValidationError("Description is required for custom services")
            if not data.get("base_price") or float(data["base_price"]) <= 0:
                raise ValidationError("A price greater than zero is required for custom services")

        if data.get("is_recurring"):
            frequency = data.get("recurring_frequency")
            if not frequency:
                raise ValidationError("Recurring frequency is required for recurring services")
            if frequency not in {item.value for item in RecurringFrequency}:
                raise ValidationError(f"Unknown recurring frequency: {frequency}")
            if not data.get("recurring_end_date"):
                raise ValidationError("End date is required for recurring services")
            if data["recurring_end_date"] < data["scheduled_date"]:
                raise ValidationError("End date must be on or after the scheduled date")

    def schedule_service(self, data: dict[str, Any]) -> ServiceSchedule:
        self._validate(data)
        self.get_or_raise(Property, data["property_id"], "Property")

        base_price = data.get("base_price")
        service_type = None
        if data.get("service_type_id"):
            service_type = self.get_or_raise(ServiceType, data["service_type_id"], "Service type")
            if base_price is None:
                base_price = service_type.base_price
        if data.get("technician_id"):
            self.get_or_raise(Technician, data["technician_id"], "Technician")

        is_recurring = bool(data.get("is_recurring"))
        frequency = data.get("recurring_frequency") if is_recurring else None
        end_date = data.get("recurring_end_date") if is_recurring else None
        next_date = (
            calculate_next_service_date(data["scheduled_date"], frequency, end_date) if is_recurring else None
        )

        record = ServiceSchedule(
            property_id=data["property_id"],
            service_type_id=service_type.id if service_type else None,
            technician_id=data.get("technician_id") or None,
            scheduled_date=data["scheduled_date"],
            scheduled_time_window=data["scheduled_time_window"],
            status=ServiceStatus.PENDING.value,
            base_price=base_price,
            description=clean_optional(data.get("description")),
            notes=clean_optional(data.get("notes")),
            is_recurring=is_recurring,
            recurring_frequency=frequency,
            recurring_end_date=end_date,
            next_service_date=next_date,
        )
        record = self.save(record)
        logger.info(
            "service.scheduled",
            extra={
                "event": "service.scheduled",
                "entity_type": "service_schedule",
                "entity_id": record.id,
                "is_recurring": is_recurring,
            },
        )
        return record

"""Service type and service schedule schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from lawnboss.core.enums import RecurringFrequency, ServiceStatus, TimeWindow
from lawnboss.schemas.customers import CustomerSummary, PropertySummary, TechnicianResponse
from lawnboss.schemas.invoices import InvoiceResponse


class ServiceTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    label: str
    description: str | None = None
    base_price: float
    tax_rate: float
    unit_type: str


class ServiceScheduleCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    property_id: str | None = None
    service_type_id: str | None = None
    technician_id: str | None = None
    scheduled_date: date | None = None
    scheduled_time_window: TimeWindow | None = None
    base_price: float | None = Field(default=None, ge=0)
    description: str | None = Field(default=None, max_length=5000)
    notes: str | None = Field(default=None, max_length=5000)
    is_recurring: bool = False
    recurring_frequency: RecurringFrequency | None = None
    recurring_end_date: date | None = None


class ServiceStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: ServiceStatus


class SchedulePropertyResponse(PropertySummary):
    customer: CustomerSummary | None = None


class ServiceScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    property_id: str
    service_type_id: str | None = None
    technician_id: str | None = None
    scheduled_date: date
    scheduled_time_window: str
    status: str
    base_price: float | None = None
    description: str | None = None
    notes: str | None = None
    is_recurring: bool
    recurring_frequency: str | None = None
    recurring_end_date: date | None = None
    next_service_date: date | None = None
    property: SchedulePropertyResponse | None = None
    service_type: ServiceTypeResponse | None = None
    technician: TechnicianResponse | None = None


class ServiceStatusUpdateResponse(BaseModel):
    service: ServiceScheduleResponse
    invoice: InvoiceResponse | None = None

"""Invoice and estimate request/response schemas."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from lawnboss.core.enums import InvoiceStatus, PaymentMethod
from lawnboss.schemas.customers import CustomerSummary


class InvoiceStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: InvoiceStatus


class PaymentCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    amount: float = Field(gt=0)
    payment_method: PaymentMethod
    payment_date: date | None = None


class InvoiceItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    service_schedule_id: str | None = None
    description: str
    quantity: float
    unit_price: float
    tax_rate: float
    tax_amount: float
    subtotal: float
    total: float


class InvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    invoice_number: str
    customer_id: str
    property_id: str | None = None
    service_schedule_id: str | None = None
    invoice_date: date
    due_date: date
    subtotal: float
    tax_amount: float
    total: float
    amount_paid: float
    balance: float
    status: str
    payment_date: date | None = None
    payment_method: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    customer: CustomerSummary | None = None
    items: list[InvoiceItemResponse] = []


class EstimateItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    service_type_id: str | None = None
    description: str
    quantity: float
    unit_price: float
    tax_rate: float
    tax_amount: float
    subtotal: float
    total: float


class EstimateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    property_id: str | None = None
    title: str
    description: str | None = None
    valid_until: date | None = None
    notes: str | None = None
    subtotal: float
    tax_amount: float
    total_amount: float
    status: str
    customer: CustomerSummary | None = None
    items: list[EstimateItemResponse] = []

"""Customer, property and technician request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CustomerCreateRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=320)
    phone: str | None = Field(default=None, max_length=32)
    company_name: str | None = Field(default=None, max_length=255)
    billing_address: str | None = Field(default=None, max_length=255)
    billing_city: str | None = Field(default=None, max_length=120)
    billing_state: str | None = Field(default=None, max_length=64)
    billing_zip: str | None = Field(default=None, max_length=20)
    referral_source: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=5000)


class CustomerUpdateRequest(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=120)
    last_name: str | None = Field(default=None, min_length=1, max_length=120)
    email: str | None = Field(default=None, min_length=3, max_length=320)
    phone: str | None = Field(default=None, max_length=32)
    company_name: str | None = Field(default=None, max_length=255)
    billing_address: str | None = Field(default=None, max_length=255)
    billing_city: str | None = Field(default=None, max_length=120)
    billing_state: str | None = Field(default=None, max_length=64)
    billing_zip: str | None = Field(default=None, max_length=20)
    payment_terms: int | None = Field(default=None, ge=0)
    tax_exempt: bool | None = None
    status: str | None = Field(default=None, pattern="^(active|inactive)$")
    referral_source: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=5000)


class CustomerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    company_name: str | None = None


class CustomerResponse(CustomerSummary):
    billing_address: str | None = None
    billing_city: str | None = None
    billing_state: str | None = None
    billing_zip: str | None = None
    payment_terms: int
    tax_exempt: bool
    status: str
    referral_source: str | None = None
    notes: str | None = None
    created_at: datetime | None = None


class PropertyCreateRequest(BaseModel):
    customer_id: str | None = None
    address_line1: str | None = Field(default=None, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=120)
    state: str | None = Field(default=None, max_length=64)
    zip_code: str | None = Field(default=None, max_length=20)
    property_size: float | str | None = None
    lawn_size: float | str | None = None
    has_irrigation: bool = False
    has_pets: bool = False
    notes: str | None = Field(default=None, max_length=5000)


class PropertyUpdateRequest(BaseModel):
    address_line1: str | None = Field(default=None, min_length=1, max_length=255)
    address_line2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=120)
    state: str | None = Field(default=None, min_length=1, max_length=64)
    zip_code: str | None = Field(default=None, min_length=1, max_length=20)
    property_size: float | str | None = None
    lawn_size: float | str | None = None
    has_irrigation: bool | None = None
    has_pets: bool | None = None
    notes: str | None = Field(default=None, max_length=5000)


class PropertySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    customer_id: str
    address_line1: str
    address_line2: str | None = None
    city: str
    state: str
    zip_code: str


class PropertyResponse(PropertySummary):
    property_size: float | None = None
    lawn_size: float | None = None
    has_irrigation: bool
    has_pets: bool
    notes: str | None = None
    customer: CustomerSummary | None = None


class TechnicianCreateRequest(BaseModel):
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    email: str = Field(min_length=3, max_length=320)
    phone: str | None = Field(default=None, max_length=32)


class TechnicianResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    first_name: str
    last_name: str
    email: str
    phone: str | None = None
    status: str

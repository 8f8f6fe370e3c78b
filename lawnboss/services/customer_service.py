"""Customer service: listing, onboarding and profile updates."""

from __future__ import annotations

import logging
from typing import Any

from lawnboss.core.enums import RecordStatus
from lawnboss.core.exceptions import ConflictError, ValidationError
from lawnboss.models import Customer, Property
from lawnboss.services.base_service import BaseService
from lawnboss.utils.formatters import format_phone_number
from lawnboss.utils.validators import clean_optional, is_valid_email, require_fields, sanitize_text

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_TERMS = 30


class CustomerService(BaseService):
    """Service for customer CRUD.

    New customers are created together with an initial property built from
    their billing address so scheduling can start right away.
    """

    def list_customers(self, include_inactive: bool = False) -> list[Customer]:
        query = self.db.query(Customer)
        if not include_inactive:
            query = query.filter(Customer.status == RecordStatus.ACTIVE.value)
        return query.order_by(Customer.created_at.desc()).all()

    def get_customer(self, customer_id: str) -> Customer:
        return self.get_or_raise(Customer, customer_id, "Customer")

    def find_by_email(self, email: str) -> Customer | None:
        return self.db.query(Customer).filter(Customer.email == email.strip().lower()).first()

    def add_customer(self, data: dict[str, Any]) -> Customer:
        email = sanitize_text(data.get("email")).lower()
        if not is_valid_email(email):
            raise ValidationError("A valid email address is required")
        require_fields(
            data,
            ("first_name", "last_name", "billing_address", "billing_city", "billing_state", "billing_zip"),
        )
        if self.find_by_email(email) is not None:
            raise ConflictError("A customer with this email already exists")

        customer = Customer(
            first_name=sanitize_text(data["first_name"]),
            last_name=sanitize_text(data["last_name"]),
            email=email,
            phone=format_phone_number(clean_optional(data.get("phone"))),
            company_name=clean_optional(data.get("company_name")),
            billing_address=clean_optional(data.get("billing_address")),
            billing_city=clean_optional(data.get("billing_city")),
            billing_state=clean_optional(data.get("billing_state")),
            billing_zip=clean_optional(data.get("billing_zip")),
            referral_source=clean_optional(data.get("referral_source")),
            notes=clean_optional(data.get("notes")),
            status=RecordStatus.ACTIVE.value,
            payment_terms=DEFAULT_PAYMENT_TERMS,
            tax_exempt=False,
        )
        customer.properties.append(
            Property(
                address_line1=customer.billing_address,
                city=customer.billing_city,
                state=customer.billing_state,
                zip_code=customer.billing_zip,
            )
        )
        self.db.add(customer)
        self.commit()
        self.db.refresh(customer)
        logger.info(
            "customer.created",
            extra={"event": "customer.created", "entity_type": "customer", "entity_id": customer.id},
        )
        return customer

    def update_customer(self, customer_id: str, updates: dict[str, Any]) -> Customer:
        customer = self.get_customer(customer_id)
        changes = dict(updates)
        if "email" in changes and changes["email"] is not None:
            email = sanitize_text(changes["email"]).lower()
            if not is_valid_email(email):
                raise ValidationError("A valid email address is required")
            existing = self.find_by_email(email)
            if existing is not None and existing.id != customer.id:
                raise ConflictError("A customer with this email already exists")
            changes["email"] = email
        if "phone" in changes:
            changes["phone"] = format_phone_number(clean_optional(changes["phone"]))
        return self.apply_updates(customer, changes)

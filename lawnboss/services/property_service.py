"""Property service."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import joinedload

from lawnboss.core.exceptions import ValidationError
from lawnboss.models import Customer, Property
from lawnboss.services.base_service import BaseService
from lawnboss.utils.validators import clean_optional, optional_number, sanitize_text

REQUIRED_FIELDS = (
    ("customer_id", "Customer ID is required"),
    ("address_line1", "Address is required"),
    ("city", "City is required"),
    ("state", "State is required"),
    ("zip_code", "ZIP code is required"),
)


class PropertyService(BaseService):
    """Service for property CRUD."""

    def list_properties(self, customer_id: str | None = None) -> list[Property]:
        query = self.db.query(Property).options(joinedload(Property.customer))
        if customer_id:
            query = query.filter(Property.customer_id == customer_id)
        return query.order_by(Property.created_at.desc()).all()

    def get_property(self, property_id: str) -> Property:
        return self.get_or_raise(Property, property_id, "Property")

    def add_property(self, data: dict[str, Any]) -> Property:
        for field_name, message in REQUIRED_FIELDS:
            if not sanitize_text(data.get(field_name)):
                raise ValidationError(message)
        self.get_or_raise(Customer, data["customer_id"], "Customer")

        record = Property(
            customer_id=data["customer_id"],
            address_line1=sanitize_text(data["address_line1"]),
            address_line2=clean_optional(data.get("address_line2")),
            city=sanitize_text(data["city"]),
            state=sanitize_text(data["state"]),
            zip_code=sanitize_text(data["zip_code"]),
            property_size=optional_number(data.get("property_size"), "property_size"),
            lawn_size=optional_number(data.get("lawn_size"), "lawn_size"),
            has_irrigation=bool(data.get("has_irrigation")),
            has_pets=bool(data.get("has_pets")),
            notes=clean_optional(data.get("notes")),
        )
        return self.save(record)

    def update_property(self, property_id: str, updates: dict[str, Any]) -> Property:
        record = self.get_property(property_id)
        changes = dict(updates)
        for field_name in ("property_size", "lawn_size"):
            if field_name in changes:
                changes[field_name] = optional_number(changes[field_name], field_name)
        return self.apply_updates(record, changes)

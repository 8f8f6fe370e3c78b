"""Reference data: service catalogue, starter technicians and the default tax rate."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from lawnboss.core.enums import RecordStatus, UnitType
from lawnboss.models import ServiceType, TaxConfiguration, Technician
from lawnboss.utils.formatters import format_phone_number

logger = logging.getLogger(__name__)

SERVICE_TYPES = (
    ("Basic Lawn Maintenance", "Mowing, edging, and cleanup", 65.00, UnitType.FLAT_RATE),
    ("Full Service Package", "Mowing, edging, cleanup, fertilization, and weed control", 120.00, UnitType.FLAT_RATE),
    ("Mulch Installation", "Premium mulch installation service", 55.00, UnitType.PER_YARD),
    ("Pine Straw Installation", "Pine straw installation by the bale", 12.00, UnitType.PER_YARD),
    ("Weed Control", "Targeted weed control application", 75.00, UnitType.FLAT_RATE),
    ("Fertilization", "Professional lawn fertilization service", 85.00, UnitType.FLAT_RATE),
    ("Pressure Washing", "High-pressure cleaning of surfaces", 95.00, UnitType.FLAT_RATE),
    ("Bush Trimming", "Professional shrub and bush trimming", 45.00, UnitType.FLAT_RATE),
    ("Leaf Removal", "Complete leaf cleanup and removal", 85.00, UnitType.FLAT_RATE),
)

TECHNICIANS = (
    ("John", "Smith", "john.smith@example.com", "555-555-0101"),
    ("Sarah", "Johnson", "sarah.j@example.com", "555-555-0102"),
    ("Mike", "Brown", "mike.b@example.com", "555-555-0103"),
    ("Emily", "Davis", "emily.d@example.com", "555-555-0104"),
)

DEFAULT_TAX = ("Default Sales Tax", "Standard sales tax rate for services and products", 0.07)


def seed_reference_data(db: Session) -> dict[str, int]:
    """Insert missing reference rows; existing rows are left untouched."""
    created = {"service_types": 0, "technicians": 0, "tax_configurations": 0}

    existing_types = {name for (name,) in db.query(ServiceType.name).all()}
    for name, description, price, unit_type in SERVICE_TYPES:
        if name in existing_types:
            continue
        db.add(
            ServiceType(
                name=name,
                label=name,
                description=description,
                base_price=price,
                tax_rate=0,
                unit_type=unit_type.value,
            )
        )
        created["service_types"] += 1

    existing_emails = {email for (email,) in db.query(Technician.email).all()}
    for first_name, last_name, email, phone in TECHNICIANS:
        if email in existing_emails:
            continue
        db.add(
            Technician(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=format_phone_number(phone),
                status=RecordStatus.ACTIVE.value,
            )
        )
        created["technicians"] += 1

    if db.query(TaxConfiguration).filter(TaxConfiguration.is_default.is_(True)).first() is None:
        name, description, rate = DEFAULT_TAX
        db.add(TaxConfiguration(name=name, description=description, rate=rate, is_default=True))
        created["tax_configurations"] += 1

    db.commit()
    logger.info("seed.reference_data", extra={"event": "seed.reference_data", **created})
    return created

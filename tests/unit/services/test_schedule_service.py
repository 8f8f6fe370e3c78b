from __future__ import annotations

from datetime import date

import pytest

from lawnboss.core.exceptions import NotFoundError, ValidationError
from lawnboss.models import ServiceType
from lawnboss.services.customer_service import CustomerService
from lawnboss.services.schedule_service import ScheduleService, add_months, calculate_next_service_date


def _seed_property(session):
    customer = CustomerService(session).add_customer(
        {
            "first_name": "Sam",
            "last_name": "Reed",
            "email": "sam@example.com",
            "billing_address": "9 Pine Rd",
            "billing_city": "Austin",
            "billing_state": "TX",
            "billing_zip": "78703",
        }
    )
    return customer.properties[0]


def _seed_service_type(session, price=65.0):
    service_type = ServiceType(name="Basic Lawn Maintenance", label="Basic Lawn Maintenance", base_price=price)
    session.add(service_type)
    session.commit()
    return service_type


def test_next_service_date_rules():
    start = date(2026, 1, 31)
    assert calculate_next_service_date(start, "weekly") == date(2026, 2, 7)
    assert calculate_next_service_date(start, "biweekly") == date(2026, 2, 14)
    assert calculate_next_service_date(start, "monthly") == date(2026, 2, 28)
    assert calculate_next_service_date(start, "custom") is None
    assert calculate_next_service_date(start, "weekly", end_date=date(2026, 2, 1)) is None


def test_add_months_clamps_leap_years():
    assert add_months(date(2028, 1, 31), 1) == date(2028, 2, 29)
    assert add_months(date(2026, 12, 15), 1) == date(2027, 1, 15)


def test_schedule_service_defaults_price_from_type(db_session):
    prop = _seed_property(db_session)
    service_type = _seed_service_type(db_session)

    record = ScheduleService(db_session).schedule_service(
        {
            "property_id": prop.id,
            "service_type_id": service_type.id,
            "scheduled_date": date(2026, 5, 4),
            "scheduled_time_window": "morning",
        }
    )
    assert record.status == "pending"
    assert record.base_price == 65.0
    assert record.next_service_date is None


def test_custom_service_requires_description_and_price(db_session):
    prop = _seed_property(db_session)
    service = ScheduleService(db_session)
    base = {"property_id": prop.id, "scheduled_date": date(2026, 5, 4), "scheduled_time_window": "afternoon"}

    with pytest.raises(ValidationError, match="Description is required"):
        service.schedule_service(base)
    with pytest.raises(ValidationError, match="price greater than zero"):
        service.schedule_service({**base, "description": "Gutter cleanout", "base_price": 0})

    record = service.schedule_service({**base, "description": "Gutter cleanout", "base_price": 150})
    assert record.description == "Gutter cleanout"


def test_recurring_service_needs_valid_end_date(db_session):
    prop = _seed_property(db_session)
    service_type = _seed_service_type(db_session)
    service = ScheduleService(db_session)
    base = {
        "property_id": prop.id,
        "service_type_id": service_type.id,
        "scheduled_date": date(2026, 5, 4),
        "scheduled_time_window": "morning",
        "is_recurring": True,
        "recurring_frequency": "biweekly",
    }

    with pytest.raises(ValidationError, match="End date is required"):
        service.schedule_service(base)
    with pytest.raises(ValidationError, match="on or after"):
        service.schedule_service({**base, "recurring_end_date": date(2026, 5, 1)})

    record = service.schedule_service({**base, "recurring_end_date": date(2026, 9, 30)})
    assert record.next_service_date == date(2026, 5, 18)


def test_schedule_service_unknown_property(db_session):
    with pytest.raises(NotFoundError, match="Property not found"):
        ScheduleService(db_session).schedule_service(
            {
                "property_id": "missing",
                "scheduled_date": date(2026, 5, 4),
                "scheduled_time_window": "morning",
                "description": "Edging",
                "base_price": 40,
            }
        )


def test_list_services_filters_by_status(db_session):
    prop = _seed_property(db_session)
    service = ScheduleService(db_session)
    for day in (6, 2):
        service.schedule_service(
            {
                "property_id": prop.id,
                "scheduled_date": date(2026, 5, day),
                "scheduled_time_window": "morning",
                "description": "Edging",
                "base_price": 40,
            }
        )

    listed = service.list_services(status="pending")
    assert [record.scheduled_date.day for record in listed] == [2, 6]
    assert service.list_services(status="completed") == []

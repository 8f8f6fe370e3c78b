from __future__ import annotations

import pytest

from lawnboss.core.exceptions import ConflictError, NotFoundError, ValidationError
from lawnboss.services.customer_service import CustomerService
from lawnboss.services.property_service import PropertyService


def _customer_payload(**overrides):
    payload = {
        "first_name": "Pat",
        "last_name": "Green",
        "email": "Pat.Green@Example.com",
        "phone": "(555) 123-4567",
        "billing_address": "12 Elm St",
        "billing_city": "Austin",
        "billing_state": "TX",
        "billing_zip": "78701",
    }
    payload.update(overrides)
    return payload


def test_add_customer_creates_initial_property(db_session):
    customer = CustomerService(db_session).add_customer(_customer_payload())

    assert customer.email == "pat.green@example.com"
    assert customer.phone == "+15551234567"
    assert customer.status == "active"
    assert customer.payment_terms == 30
    assert customer.tax_exempt is False
    assert len(customer.properties) == 1
    prop = customer.properties[0]
    assert (prop.address_line1, prop.city, prop.state, prop.zip_code) == ("12 Elm St", "Austin", "TX", "78701")


def test_add_customer_rejects_duplicate_email(db_session):
    service = CustomerService(db_session)
    service.add_customer(_customer_payload())

    with pytest.raises(ConflictError, match="already exists"):
        service.add_customer(_customer_payload(email="pat.green@example.com"))


def test_add_customer_requires_billing_address(db_session):
    with pytest.raises(ValidationError, match="billing_city"):
        CustomerService(db_session).add_customer(_customer_payload(billing_city=""))


def test_list_customers_hides_inactive(db_session):
    service = CustomerService(db_session)
    active = service.add_customer(_customer_payload())
    inactive = service.add_customer(_customer_payload(email="old@example.com"))
    service.update_customer(inactive.id, {"status": "inactive"})

    assert [c.id for c in service.list_customers()] == [active.id]
    assert len(service.list_customers(include_inactive=True)) == 2


def test_update_customer_rejects_taken_email(db_session):
    service = CustomerService(db_session)
    service.add_customer(_customer_payload())
    other = service.add_customer(_customer_payload(email="other@example.com"))

    with pytest.raises(ConflictError):
        service.update_customer(other.id, {"email": "PAT.GREEN@example.com"})


def test_get_customer_not_found(db_session):
    with pytest.raises(NotFoundError, match="Customer not found"):
        CustomerService(db_session).get_customer("missing")


def test_add_property_validates_and_parses_sizes(db_session):
    customer = CustomerService(db_session).add_customer(_customer_payload())
    service = PropertyService(db_session)

    with pytest.raises(ValidationError, match="ZIP code is required"):
        service.add_property({"customer_id": customer.id, "address_line1": "1 Oak", "city": "Austin", "state": "TX"})

    prop = service.add_property(
        {
            "customer_id": customer.id,
            "address_line1": "1 Oak Ave",
            "city": "Austin",
            "state": "TX",
            "zip_code": "78702",
            "lawn_size": "5400",
            "property_size": "",
        }
    )
    assert prop.lawn_size == 5400.0
    assert prop.property_size is None
    assert len(service.list_properties(customer_id=customer.id)) == 2


def test_add_property_unknown_customer(db_session):
    with pytest.raises(NotFoundError):
        PropertyService(db_session).add_property(
            {"customer_id": "nope", "address_line1": "1 Oak", "city": "Austin", "state": "TX", "zip_code": "78702"}
        )

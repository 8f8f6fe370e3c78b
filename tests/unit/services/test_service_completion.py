from __future__ import annotations

from datetime import date, timedelta

import pytest
from sqlalchemy.exc import OperationalError

import lawnboss.services.service_completion as completion_module
from lawnboss.core.exceptions import ConflictError, NotFoundError
from lawnboss.core.state_machine import InvalidTransitionError
from lawnboss.models import Invoice, InvoiceItem, ServiceSchedule, ServiceType, TaxConfiguration
from lawnboss.services.customer_service import CustomerService
from lawnboss.services.service_completion import ServiceCompletionService, describe_service
from lawnboss.services.tax_service import TaxService, calculate_tax


def _seed_service(session, base_price=100.0, description=None, with_type=False):
    customer = CustomerService(session).add_customer(
        {
            "first_name": "Alex",
            "last_name": "Moss",
            "email": "alex@example.com",
            "billing_address": "4 Birch Ln",
            "billing_city": "Austin",
            "billing_state": "TX",
            "billing_zip": "78704",
        }
    )
    service_type = None
    if with_type:
        service_type = ServiceType(name="Fertilization", label="Fertilization", base_price=85)
        session.add(service_type)
    service = ServiceSchedule(
        property_id=customer.properties[0].id,
        service_type=service_type,
        scheduled_date=date(2026, 6, 1),
        scheduled_time_window="morning",
        base_price=base_price,
        description=description,
    )
    session.add(service)
    session.commit()
    return customer, service


def _seed_tax(session, rate, name="Default Sales Tax"):
    session.add(TaxConfiguration(name=name, rate=rate, is_default=True))
    session.commit()


def test_calculate_tax_rounds_to_cents():
    breakdown = calculate_tax(65, 0.0825)
    assert breakdown.tax_amount == 5.36
    assert breakdown.total == 70.36
    assert calculate_tax(None, 0.07).total == 0.0


def test_completing_service_creates_invoice(db_session):
    _seed_tax(db_session, 0.08)
    customer, service = _seed_service(db_session, base_price=100.0, description="Spring cleanup")

    result = ServiceCompletionService(db_session).update_status(service.id, "completed")

    assert result.service.status == "completed"
    invoice = result.invoice
    assert invoice is not None
    assert invoice.customer_id == customer.id
    assert invoice.service_schedule_id == service.id
    assert invoice.invoice_number.startswith("INV-")
    assert invoice.status == "draft"
    assert (invoice.subtotal, invoice.tax_amount, invoice.total) == (100.0, 8.0, 108.0)
    assert invoice.balance == 108.0
    assert invoice.amount_paid == 0
    assert invoice.due_date == invoice.invoice_date + timedelta(days=30)

    items = db_session.query(InvoiceItem).filter(InvoiceItem.invoice_id == invoice.id).all()
    assert len(items) == 1
    item = items[0]
    assert item.description == "Spring cleanup"
    assert item.quantity == 1
    assert item.unit_price == 100.0
    assert item.tax_rate == 0.08
    assert item.total == 108.0


def test_missing_default_tax_bills_without_tax(db_session):
    _, service = _seed_service(db_session, base_price=65.0, with_type=True)

    invoice = ServiceCompletionService(db_session).update_status(service.id, "completed").invoice

    assert invoice.tax_amount == 0
    assert invoice.total == 65.0
    assert invoice.items[0].description == "Fertilization"


def test_multiple_default_taxes_fall_back_to_zero(db_session):
    _seed_tax(db_session, 0.07)
    _seed_tax(db_session, 0.09, name="County Tax")

    assert TaxService(db_session).get_default_rate() == 0.0


def test_failed_tax_lookup_rolls_back_before_billing(db_session, monkeypatch):
    _seed_tax(db_session, 0.07)
    _, service = _seed_service(db_session, base_price=100.0, description="Edging")
    calls = []
    real_rollback = db_session.rollback

    def _broken_lookup(self):
        calls.append(("lookup", bool(self.db.dirty or self.db.new)))
        raise OperationalError("SELECT tax_configurations", {}, Exception("current transaction is aborted"))

    def _rollback():
        calls.append(("rollback", None))
        real_rollback()

    monkeypatch.setattr(TaxService, "get_default_configuration", _broken_lookup)
    monkeypatch.setattr(db_session, "rollback", _rollback)

    result = ServiceCompletionService(db_session).update_status(service.id, "completed")

    assert calls == [("lookup", False), ("rollback", None)]
    assert result.service.status == "completed"
    assert (result.invoice.tax_amount, result.invoice.total) == (0.0, 100.0)
    assert result.invoice.items[0].tax_rate == 0.0


def test_null_base_price_bills_zero(db_session):
    _seed_tax(db_session, 0.07)
    _, service = _seed_service(db_session, base_price=None)

    invoice = ServiceCompletionService(db_session).update_status(service.id, "completed").invoice

    assert invoice.total == 0.0
    assert invoice.items[0].description == "Service"


def test_non_completion_status_creates_no_invoice(db_session):
    _, service = _seed_service(db_session)

    result = ServiceCompletionService(db_session).update_status(service.id, "in_progress")

    assert result.invoice is None
    assert db_session.query(Invoice).count() == 0


def test_completing_twice_is_rejected(db_session):
    _, service = _seed_service(db_session)
    completion = ServiceCompletionService(db_session)
    completion.update_status(service.id, "completed")

    with pytest.raises(InvalidTransitionError):
        completion.update_status(service.id, "completed")
    assert db_session.query(Invoice).count() == 1


def test_invoice_failure_leaves_service_unchanged(db_session, monkeypatch):
    customer, service = _seed_service(db_session)
    db_session.add(
        Invoice(
            customer_id=customer.id,
            invoice_number="INV-1",
            due_date=date(2026, 7, 1),
        )
    )
    db_session.commit()
    monkeypatch.setattr(completion_module, "generate_invoice_number", lambda: "INV-1")

    with pytest.raises(ConflictError):
        ServiceCompletionService(db_session).update_status(service.id, "completed")

    db_session.expire_all()
    assert db_session.get(ServiceSchedule, service.id).status == "pending"
    assert db_session.query(Invoice).count() == 1
    assert db_session.query(InvoiceItem).count() == 0


def test_unknown_service(db_session):
    with pytest.raises(NotFoundError, match="Service not found"):
        ServiceCompletionService(db_session).update_status("missing", "completed")


def test_describe_service_prefers_description():
    service = ServiceSchedule(description="Hedge shaping")
    assert describe_service(service) == "Hedge shaping"
    assert describe_service(ServiceSchedule()) == "Service"

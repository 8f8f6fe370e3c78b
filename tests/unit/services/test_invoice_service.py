from __future__ import annotations

from datetime import date

import pytest

from lawnboss.core.exceptions import ValidationError
from lawnboss.core.state_machine import InvalidTransitionError
from lawnboss.models import Customer, Invoice
from lawnboss.services.invoice_service import InvoiceService


def _seed_invoice(session, status="sent", total=108.0):
    customer = Customer(first_name="Jo", last_name="Ash", email="jo@example.com")
    session.add(customer)
    session.commit()
    invoice = Invoice(
        customer_id=customer.id,
        invoice_number="INV-1760000000000",
        invoice_date=date(2026, 6, 1),
        due_date=date(2026, 7, 1),
        subtotal=100.0,
        tax_amount=8.0,
        total=total,
        amount_paid=0,
        balance=total,
        status=status,
    )
    session.add(invoice)
    session.commit()
    return invoice


def test_partial_then_full_payment(db_session):
    invoice = _seed_invoice(db_session)
    service = InvoiceService(db=db_session)

    partial = service.record_payment(invoice.id, 50, "check", payment_date=date(2026, 6, 10))
    assert partial.amount_paid == 50.0
    assert partial.balance == 58.0
    assert partial.status == "sent"

    paid = service.record_payment(invoice.id, 58, "cash")
    assert paid.balance == 0
    assert paid.status == "paid"
    assert paid.payment_method == "cash"


def test_payment_rejected_on_paid_invoice(db_session):
    invoice = _seed_invoice(db_session, status="paid")
    with pytest.raises(ValidationError, match="paid invoice"):
        InvoiceService(db=db_session).record_payment(invoice.id, 10, "cash")


def test_sent_status_is_reserved(db_session):
    invoice = _seed_invoice(db_session, status="draft")
    with pytest.raises(ValidationError):
        InvoiceService(db=db_session).update_status(invoice.id, "sent")


def test_mark_paid_settles_balance(db_session):
    invoice = _seed_invoice(db_session)
    paid = InvoiceService(db=db_session).update_status(invoice.id, "paid")

    assert paid.amount_paid == 108.0
    assert paid.balance == 0
    assert paid.payment_date == date.today()


def test_cancelled_invoice_cannot_be_reopened(db_session):
    invoice = _seed_invoice(db_session, status="cancelled")
    with pytest.raises(InvalidTransitionError):
        InvoiceService(db=db_session).update_status(invoice.id, "overdue")


def test_list_invoices_by_status(db_session):
    _seed_invoice(db_session, status="draft")
    service = InvoiceService(db=db_session)
    assert len(service.list_invoices(status="draft")) == 1
    assert service.list_invoices(status="paid") == []


def test_payment_rejected_on_draft_invoice(db_session):
    invoice = _seed_invoice(db_session, status="draft", total=50.0)

    with pytest.raises(ValidationError, match="draft invoice"):
        InvoiceService(db=db_session).record_payment(invoice.id, 50, "cash")

    db_session.expire_all()
    stored = db_session.get(Invoice, invoice.id)
    assert stored.status == "draft"
    assert stored.amount_paid == 0
    assert stored.balance == 50.0


def test_full_payment_on_overdue_invoice(db_session):
    invoice = _seed_invoice(db_session, status="overdue", total=50.0)
    paid = InvoiceService(db=db_session).record_payment(invoice.id, 50, "cash")
    assert paid.status == "paid"

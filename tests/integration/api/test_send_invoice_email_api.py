from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

import lawnboss.api.functions.send_invoice_email as send_invoice_email_module
from lawnboss.api.functions.send_invoice_email import get_email_sender
from lawnboss.core.config import get_config
from lawnboss.core.exceptions import ConfigurationError, DatabaseError, UpstreamServiceError
from lawnboss.database.db import get_db
from lawnboss.models import Customer, Invoice, InvoiceItem, Message, MessageRecipient
from lawnboss.services.invoice_notification import InvoiceNotificationService

ENDPOINT = "/functions/v1/send-invoice-email"


class _FakeSender:
    def __init__(self, configured: bool = True, reject: bool = False, crash: bool = False) -> None:
        self.configured = configured
        self.reject = reject
        self.crash = crash
        self.sent = []

    def ensure_configured(self) -> None:
        if not self.configured:
            raise ConfigurationError("SendGrid API key not configured")

    def send(self, email) -> None:
        if self.crash:
            raise RuntimeError("template exploded")
        if self.reject:
            raise UpstreamServiceError("Failed to send email: forbidden", status_code=403, body="forbidden")
        self.sent.append(email)


@pytest.fixture
def sender(app):
    fake = _FakeSender()
    app.dependency_overrides[get_email_sender] = lambda: fake
    return fake


def _seed_invoice(session_factory, status="draft"):
    session = session_factory()
    customer = Customer(
        first_name="Dana",
        last_name="Field",
        email="dana@example.com",
        billing_address="3 Cedar Ct",
        billing_city="Austin",
        billing_state="TX",
        billing_zip="78706",
    )
    session.add(customer)
    session.commit()
    invoice = Invoice(
        customer_id=customer.id,
        invoice_number="INV-1760000000001",
        invoice_date=date(2026, 6, 1),
        due_date=date(2026, 7, 1),
        subtotal=100.0,
        tax_amount=8.0,
        total=108.0,
        balance=108.0,
        status=status,
    )
    invoice.items.append(
        InvoiceItem(
            description="Spring cleanup",
            quantity=1,
            unit_price=100.0,
            tax_rate=0.08,
            tax_amount=8.0,
            subtotal=100.0,
            total=108.0,
        )
    )
    session.add(invoice)
    session.commit()
    invoice_id, customer_id = invoice.id, customer.id
    session.close()
    return invoice_id, customer_id


def test_preflight_returns_cors_headers(app, client):
    def _unexpected():
        raise AssertionError("preflight resolved a dependency")

    app.dependency_overrides[get_db] = _unexpected
    app.dependency_overrides[get_email_sender] = _unexpected

    response = client.options(ENDPOINT)
    assert response.status_code == 204
    assert response.headers["access-control-allow-origin"] == "*"
    assert "POST" in response.headers["access-control-allow-methods"]


def test_missing_sendgrid_config_is_server_error(app, client):
    app.dependency_overrides[get_email_sender] = lambda: _FakeSender(configured=False)
    response = client.post(ENDPOINT, json={"invoiceId": "anything"})
    assert response.status_code == 500
    assert response.json() == {"error": "SendGrid API key not configured"}


def test_body_must_carry_invoice_id(client, sender):
    assert client.post(ENDPOINT, json={}).status_code == 400
    assert client.post(ENDPOINT, json=["x"]).json() == {"error": "Request body must be a JSON object"}
    assert client.post(ENDPOINT, content=b"not json").status_code == 400


def test_unknown_invoice_is_404_and_sends_nothing(client, sender, session_factory):
    response = client.post(ENDPOINT, json={"invoiceId": "missing"})

    assert response.status_code == 404
    assert response.json() == {"error": "Invoice not found"}
    assert sender.sent == []
    session = session_factory()
    assert session.query(Message).count() == 0
    session.close()


def test_sendgrid_rejection_leaves_no_trace(app, client, session_factory):
    app.dependency_overrides[get_email_sender] = lambda: _FakeSender(reject=True)
    invoice_id, _ = _seed_invoice(session_factory)

    response = client.post(ENDPOINT, json={"invoiceId": invoice_id})

    assert response.status_code == 400
    assert response.json()["error"].startswith("Failed to send email")
    session = session_factory()
    assert session.query(Message).count() == 0
    assert session.get(Invoice, invoice_id).status == "draft"
    session.close()


def test_successful_send_records_message_and_marks_sent(client, sender, session_factory):
    invoice_id, customer_id = _seed_invoice(session_factory)

    response = client.post(ENDPOINT, json={"invoiceId": invoice_id}, headers={"x-user-id": "office-1"})

    assert response.status_code == 200
    assert response.json() == {"message": "Invoice sent successfully"}
    assert response.headers["access-control-allow-origin"] == "*"

    [email] = sender.sent
    assert email.to_email == "dana@example.com"
    assert email.to_name == "Dana Field"
    assert email.subject == "Invoice #INV-1760000000001 from LawnBoss"
    assert "Total Amount: $108.00" in email.text_body
    assert "Tax (8.0%): $8.00" in email.text_body
    assert f"/invoices/{invoice_id}/view" in email.html_body

    session = session_factory()
    message = session.query(Message).one()
    assert message.type == "invoice"
    assert message.status == "sent"
    assert message.subject == "Invoice #INV-1760000000001"
    assert message.sent_by == "office-1"
    assert message.meta == {"invoice_id": invoice_id, "customer_id": customer_id}
    recipient = session.query(MessageRecipient).one()
    assert recipient.customer_id == customer_id
    assert recipient.recipient_email == "dana@example.com"
    assert recipient.sent_at is not None
    assert session.get(Invoice, invoice_id).status == "sent"
    session.close()


def test_resending_paid_invoice_keeps_status(client, sender, session_factory):
    invoice_id, _ = _seed_invoice(session_factory, status="paid")

    assert client.post(ENDPOINT, json={"invoiceId": invoice_id}).status_code == 200

    session = session_factory()
    assert session.get(Invoice, invoice_id).status == "paid"
    session.close()


def test_record_failure_after_send_is_400(client, sender, session_factory, monkeypatch, caplog):
    invoice_id, _ = _seed_invoice(session_factory)

    def _failing_commit(self):
        self.db.rollback()
        raise DatabaseError("database is locked")

    monkeypatch.setattr(InvoiceNotificationService, "commit", _failing_commit)
    with caplog.at_level("ERROR", logger="lawnboss.services.invoice_notification"):
        response = client.post(ENDPOINT, json={"invoiceId": invoice_id})

    assert response.status_code == 400
    assert response.json() == {"error": "database is locked"}
    assert len(sender.sent) == 1
    assert any(record.getMessage() == "invoice.notification.record_failed" for record in caplog.records)
    session = session_factory()
    assert session.query(Message).count() == 0
    assert session.query(MessageRecipient).count() == 0
    assert session.get(Invoice, invoice_id).status == "draft"
    session.close()


@pytest.mark.parametrize("debug", [False, True])
def test_unexpected_error_is_500(app, client, session_factory, monkeypatch, debug):
    app.dependency_overrides[get_email_sender] = lambda: _FakeSender(crash=True)
    monkeypatch.setattr(send_invoice_email_module, "get_config", lambda: replace(get_config(), DEBUG=debug))
    invoice_id, _ = _seed_invoice(session_factory)

    response = client.post(ENDPOINT, json={"invoiceId": invoice_id})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "template exploded"
    assert response.headers["access-control-allow-origin"] == "*"
    if debug:
        assert "RuntimeError: template exploded" in body["details"]
    else:
        assert "details" not in body

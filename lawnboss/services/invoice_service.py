"""Invoice service for listing, status changes and payments."""

from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import joinedload, selectinload

from lawnboss.core.enums import InvoiceStatus
from lawnboss.core.exceptions import NotFoundError, ValidationError
from lawnboss.core.state_machine import INVOICE_STATUS_MACHINE
from lawnboss.models import Invoice, InvoiceItem
from lawnboss.services.base_service import BaseService
from lawnboss.utils.validators import round_money

logger = logging.getLogger(__name__)


class InvoiceService(BaseService):
    """Service for invoice reads, status transitions and payment recording."""

    def list_invoices(self, status: str | None = None) -> list[Invoice]:
        query = self.db.query(Invoice).options(joinedload(Invoice.customer), selectinload(Invoice.items))
        if status:
            query = query.filter(Invoice.status == status)
        return query.order_by(Invoice.created_at.desc()).all()

    def get_invoice(self, invoice_id: str) -> Invoice:
        invoice = (
            self.db.query(Invoice)
            .options(
                joinedload(Invoice.customer),
                joinedload(Invoice.property),
                selectinload(Invoice.items).joinedload(InvoiceItem.service_schedule),
            )
            .filter(Invoice.id == invoice_id)
            .first()
        )
        if invoice is None:
            raise NotFoundError("Invoice not found")
        return invoice

    def update_status(self, invoice_id: str, status: str) -> Invoice:
        if status == InvoiceStatus.SENT.value:
            raise ValidationError("Invoices are marked sent by the invoice e-mail function")
        invoice = self.get_invoice(invoice_id)
        INVOICE_STATUS_MACHINE.assert_transition(invoice.status, status)
        invoice.status = status
        if status == InvoiceStatus.PAID.value:
            invoice.amount_paid = invoice.total
            invoice.balance = 0
            invoice.payment_date = invoice.payment_date or date.today()
        self.commit()
        self.db.refresh(invoice)
        return invoice

    def record_payment(
        self,
        invoice_id: str,
        amount: float,
        payment_method: str,
        payment_date: date | None = None,
    ) -> Invoice:
        if amount <= 0:
            raise ValidationError("Payment amount must be greater than zero")
        invoice = self.get_invoice(invoice_id)
        if invoice.status in {InvoiceStatus.DRAFT.value, InvoiceStatus.CANCELLED.value, InvoiceStatus.PAID.value}:
            raise ValidationError(f"Cannot record a payment on a {invoice.status} invoice")

        invoice.amount_paid = round_money((invoice.amount_paid or 0) + amount)
        invoice.balance = round_money((invoice.total or 0) - invoice.amount_paid)
        invoice.payment_method = payment_method
        invoice.payment_date = payment_date or date.today()
        if invoice.balance <= 0:
            invoice.status = InvoiceStatus.PAID.value
        self.commit()
        self.db.refresh(invoice)
        logger.info(
            "invoice.payment_recorded",
            extra={
                "event": "invoice.payment_recorded",
                "entity_type": "invoice",
                "entity_id": invoice.id,
                "amount": amount,
                "balance": invoice.balance,
            },
        )
        return invoice

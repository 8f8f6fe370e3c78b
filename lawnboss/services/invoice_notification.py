"""Invoice e-mail notification: render, send and record."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from lawnboss.core.config import Config, get_config
from lawnboss.core.enums import InvoiceStatus, MessageType
from lawnboss.core.exceptions import ConflictError, DatabaseError
from lawnboss.models import Invoice
from lawnboss.services.base_service import BaseService
from lawnboss.services.email_sender import OutboundEmail, SendGridEmailSender
from lawnboss.services.invoice_service import InvoiceService
from lawnboss.services.message_service import MessageService
from lawnboss.services.templating import get_template_environment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedInvoiceEmail:
    subject: str
    text_body: str
    html_body: str


def invoice_view_url(config: Config, invoice_id: str) -> str:
    return f"{config.PUBLIC_SITE_URL}/invoices/{invoice_id}/view"


def render_invoice_email(invoice: Invoice, config: Config) -> RenderedInvoiceEmail:
    env = get_template_environment()
    context = {
        "invoice": invoice,
        "customer": invoice.customer,
        "company": {"name": config.COMPANY_NAME},
        "view_url": invoice_view_url(config, invoice.id),
    }
    return RenderedInvoiceEmail(
        subject=f"Invoice #{invoice.invoice_number} from {config.COMPANY_NAME}",
        text_body=env.get_template("invoice_email.txt").render(**context),
        html_body=env.get_template("invoice_email.html").render(**context),
    )


class InvoiceNotificationService(BaseService):
    """Sends an invoice to its customer and records the outcome.

    The provider call happens first; only after SendGrid accepts the message
    are the message, its recipient and the invoice status written, in one
    transaction.
    """

    def __init__(
        self,
        db: Session | None = None,
        sender: SendGridEmailSender | None = None,
        config: Config | None = None,
    ) -> None:
        super().__init__(db)
        self.config = config or get_config()
        self.sender = sender or SendGridEmailSender(config=self.config)

    def send_invoice(self, invoice_id: str, sent_by: str | None = None) -> Invoice:
        invoice = InvoiceService(self.db).get_invoice(invoice_id)
        customer = invoice.customer
        rendered = render_invoice_email(invoice, self.config)

        self.sender.send(
            OutboundEmail(
                to_email=customer.email,
                to_name=customer.full_name,
                subject=rendered.subject,
                text_body=rendered.text_body,
                html_body=rendered.html_body,
            )
        )

        try:
            MessageService(self.db).stage_sent_message(
                message_type=MessageType.INVOICE.value,
                subject=f"Invoice #{invoice.invoice_number}",
                content=rendered.text_body,
                customer=customer,
                sent_by=sent_by,
                metadata={"invoice_id": invoice.id, "customer_id": invoice.customer_id},
            )
            if invoice.status == InvoiceStatus.DRAFT.value:
                invoice.status = InvoiceStatus.SENT.value
            self.commit()
        except (ConflictError, DatabaseError):
            logger.exception(
                "invoice.notification.record_failed",
                extra={"event": "invoice.notification.record_failed", "entity_type": "invoice", "entity_id": invoice_id},
            )
            raise

        self.db.refresh(invoice)
        logger.info(
            "invoice.notification.sent",
            extra={
                "event": "invoice.notification.sent",
                "entity_type": "invoice",
                "entity_id": invoice.id,
                "to_email": customer.email,
                "status": invoice.status,
            },
        )
        return invoice

"""Service completion workflow: status change and invoice generation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from lawnboss.core.config import get_config
from lawnboss.core.enums import InvoiceStatus, ServiceStatus
from lawnboss.core.exceptions import NotFoundError
from lawnboss.core.state_machine import SERVICE_STATUS_MACHINE
from lawnboss.models import Invoice, InvoiceItem, ServiceSchedule
from lawnboss.services.base_service import BaseService
from lawnboss.services.tax_service import TaxService, calculate_tax
from lawnboss.utils.ids import generate_invoice_number

logger = logging.getLogger(__name__)

FALLBACK_ITEM_DESCRIPTION = "Service"


@dataclass
class StatusChangeResult:
    service: ServiceSchedule
    invoice: Invoice | None = None


def describe_service(service: ServiceSchedule) -> str:
    if service.description:
        return service.description
    if service.service_type is not None and service.service_type.label:
        return service.service_type.label
    return FALLBACK_ITEM_DESCRIPTION


class ServiceCompletionService(BaseService):
    """Moves a service schedule through its statuses.

    Completing a service bills it: the status change, the invoice and its
    single line item are committed together or not at all.
    """

    def update_status(self, service_id: str, status: str) -> StatusChangeResult:
        service = self.db.get(ServiceSchedule, service_id)
        if service is None:
            raise NotFoundError("Service not found")

        previous = service.status
        SERVICE_STATUS_MACHINE.assert_transition(previous, status)
        # Looked up before any write is staged; a failed lookup rolls back.
        rate = TaxService(self.db).get_default_rate() if status == ServiceStatus.COMPLETED.value else 0.0
        service.status = status

        invoice = None
        try:
            if status == ServiceStatus.COMPLETED.value:
                invoice = self._build_invoice(service, rate)
                self.db.add(invoice)
            self.commit()
        except Exception:
            self.rollback()
            raise

        self.db.refresh(service)
        if invoice is not None:
            self.db.refresh(invoice)
        logger.info(
            "service.status_changed",
            extra={
                "event": "service.status_changed",
                "entity_type": "service_schedule",
                "entity_id": service.id,
                "from_status": previous,
                "to_status": status,
                "invoice_id": invoice.id if invoice is not None else None,
            },
        )
        return StatusChangeResult(service=service, invoice=invoice)

    def _build_invoice(self, service: ServiceSchedule, rate: float) -> Invoice:
        breakdown = calculate_tax(service.base_price, rate)
        today = date.today()

        invoice = Invoice(
            customer_id=service.property.customer_id,
            property_id=service.property_id,
            service_schedule_id=service.id,
            invoice_number=generate_invoice_number(),
            invoice_date=today,
            due_date=today + timedelta(days=get_config().INVOICE_DUE_DAYS),
            subtotal=breakdown.subtotal,
            tax_amount=breakdown.tax_amount,
            total=breakdown.total,
            amount_paid=0,
            balance=breakdown.total,
            status=InvoiceStatus.DRAFT.value,
        )
        invoice.items.append(
            InvoiceItem(
                service_schedule_id=service.id,
                description=describe_service(service),
                quantity=1,
                unit_price=breakdown.subtotal,
                tax_rate=rate,
                tax_amount=breakdown.tax_amount,
                subtotal=breakdown.subtotal,
                total=breakdown.total,
            )
        )
        return invoice

"""Invoice and estimate PDF rendering."""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Protocol

from markupsafe import escape
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import Session

from lawnboss.core.config import Config, get_config
from lawnboss.core.enums import DocumentType
from lawnboss.core.exceptions import ValidationError
from lawnboss.models import Estimate, Invoice
from lawnboss.services.base_service import BaseService
from lawnboss.services.estimate_service import EstimateService
from lawnboss.services.invoice_service import InvoiceService
from lawnboss.services.templating import get_template_environment

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
PAGE_CSS = "@page { size: A4; margin: 1cm; }"

INVOICE_FOOTER = "Please make checks payable to {company} or visit our website for online payment options."
ESTIMATE_FOOTER = "This estimate is valid for 30 days from the date of issue."


class PdfRenderer(Protocol):
    def render(self, html: str) -> bytes: ...


class WeasyPrintRenderer:
    """Prints HTML to an A4 PDF with 1cm margins."""

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    def render(self, html: str) -> bytes:
        from weasyprint import CSS, HTML

        return HTML(string=html, base_url=self.base_url).write_pdf(stylesheets=[CSS(string=PAGE_CSS)])


def row_to_dict(record: Any) -> dict[str, Any]:
    """Column values of a mapped row keyed by attribute name."""
    mapper = sa_inspect(record).mapper
    return {attr.key: getattr(record, attr.key) for attr in mapper.column_attrs}


def get_nested_value(data: Any, path: str) -> Any:
    """Walk ``a.b.0.c`` through dicts and lists; any missing segment yields None."""
    current = data
    for segment in path.split("."):
        if isinstance(current, dict):
            current = current.get(segment)
        elif isinstance(current, (list, tuple)) and segment.isdigit():
            index = int(segment)
            current = current[index] if index < len(current) else None
        else:
            return None
        if current is None:
            return None
    return current


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def substitute_template(template: str, data: dict[str, Any]) -> str:
    """Fill ``{{ path }}`` tokens with HTML-escaped graph values.

    The template markup is trusted; only substituted values are escaped.
    """

    def replace(match: re.Match[str]) -> str:
        return str(escape(_stringify(get_nested_value(data, match.group(1).strip()))))

    return TOKEN_PATTERN.sub(replace, template)


def invoice_graph(invoice: Invoice) -> dict[str, Any]:
    graph = row_to_dict(invoice)
    graph["customer"] = row_to_dict(invoice.customer)
    items = []
    for item in invoice.items:
        entry = row_to_dict(item)
        schedule = item.service_schedule
        entry["service_schedule"] = {"description": schedule.description} if schedule is not None else None
        items.append(entry)
    graph["items"] = items
    return graph


def estimate_graph(estimate: Estimate) -> dict[str, Any]:
    graph = row_to_dict(estimate)
    graph["customer"] = row_to_dict(estimate.customer)
    items = []
    for item in estimate.items:
        entry = row_to_dict(item)
        service_type = item.service_type
        entry["service_type"] = (
            {"name": service_type.name, "description": service_type.description} if service_type is not None else None
        )
        items.append(entry)
    graph["items"] = items
    return graph


def _invoice_rows(graph: dict[str, Any]) -> list[dict[str, Any]]:
    rows = []
    for item in graph["items"]:
        schedule = item.get("service_schedule") or {}
        rows.append(
            {
                "description": schedule.get("description") or item["description"],
                "quantity": item["quantity"],
                "unit_price": item["unit_price"],
                "tax_amount": item["tax_amount"],
                "total": item["total"],
            }
        )
    return rows


def _estimate_rows(graph: dict[str, Any]) -> list[dict[str, Any]]:
    rows = []
    for item in graph["items"]:
        service_type = item.get("service_type")
        description = f"{service_type['name']} - {item['description']}" if service_type else item["description"]
        rows.append(
            {
                "description": description,
                "quantity": item["quantity"],
                "unit_price": item["unit_price"],
                "tax_amount": item["tax_amount"],
                "total": item["total"],
            }
        )
    return rows


def render_default_document(document_type: str, graph: dict[str, Any], config: Config) -> str:
    is_invoice = document_type == DocumentType.INVOICE.value
    document = {
        "title": "Invoice" if is_invoice else "Estimate",
        "number": graph["invoice_number"] if is_invoice else graph["id"],
        "issued": graph.get("invoice_date") if is_invoice else graph.get("created_at"),
        "due_date": graph.get("due_date") if is_invoice else None,
        "valid_until": None if is_invoice else graph.get("valid_until"),
        "rows": _invoice_rows(graph) if is_invoice else _estimate_rows(graph),
        "subtotal": graph["subtotal"],
        "tax_amount": graph["tax_amount"],
        "total": graph["total"] if is_invoice else graph["total_amount"],
        "notes": graph.get("notes"),
        "footer": INVOICE_FOOTER.format(company=config.COMPANY_NAME) if is_invoice else ESTIMATE_FOOTER,
    }
    company = {
        "name": config.COMPANY_NAME,
        "tagline": config.COMPANY_TAGLINE,
        "address": config.COMPANY_ADDRESS,
        "phone": config.COMPANY_PHONE,
        "email": config.COMPANY_EMAIL,
    }
    template = get_template_environment().get_template("document.html")
    return template.render(document=document, customer=graph["customer"], company=company)


class DocumentService(BaseService):
    """Loads an invoice or estimate graph and prints it."""

    def __init__(
        self,
        db: Session | None = None,
        renderer: PdfRenderer | None = None,
        config: Config | None = None,
    ) -> None:
        super().__init__(db)
        self.config = config or get_config()
        self.renderer = renderer or WeasyPrintRenderer()

    def load_graph(self, document_type: str, document_id: str) -> dict[str, Any]:
        if document_type == DocumentType.INVOICE.value:
            return invoice_graph(InvoiceService(self.db).get_invoice(document_id))
        if document_type == DocumentType.ESTIMATE.value:
            return estimate_graph(EstimateService(self.db).get_estimate(document_id))
        raise ValidationError("Invalid request parameters")

    def build_html(self, document_type: str, document_id: str, template: str | None = None) -> str:
        graph = self.load_graph(document_type, document_id)
        if template:
            return substitute_template(template, graph)
        return render_default_document(document_type, graph, self.config)

    def render_pdf(self, html: str) -> bytes:
        pdf = self.renderer.render(html)
        logger.info("document.rendered", extra={"event": "document.rendered", "size_bytes": len(pdf)})
        return pdf

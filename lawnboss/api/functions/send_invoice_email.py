"""``send-invoice-email`` function: e-mail an invoice to its customer."""

from __future__ import annotations

import logging
import traceback

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from lawnboss.api.cors import error_response, json_response, preflight_response
from lawnboss.api.functions._body import read_json_object
from lawnboss.core.config import get_config
from lawnboss.core.exceptions import (
    ConfigurationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    UpstreamServiceError,
    ValidationError,
)
from lawnboss.core.logging import LogContext, build_log_event
from lawnboss.database.db import get_db
from lawnboss.schemas.common import ErrorEnvelope
from lawnboss.services.email_sender import SendGridEmailSender
from lawnboss.services.invoice_notification import InvoiceNotificationService

logger = logging.getLogger(__name__)

FUNCTION_NAME = "send-invoice-email"

router = APIRouter(tags=["functions"])


def get_email_sender() -> SendGridEmailSender:
    return SendGridEmailSender(config=get_config())


@router.options(f"/{FUNCTION_NAME}", include_in_schema=False)
async def send_invoice_email_preflight() -> Response:
    return preflight_response()


@router.post(
    f"/{FUNCTION_NAME}",
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}, 500: {"model": ErrorEnvelope}},
)
async def send_invoice_email(
    request: Request,
    db: Session = Depends(get_db),
    sender: SendGridEmailSender = Depends(get_email_sender),
) -> Response:
    config = get_config()
    context = LogContext(function_name=FUNCTION_NAME, user_id=request.headers.get("x-user-id"))
    try:
        sender.ensure_configured()
    except ConfigurationError as exc:
        logger.error("function.misconfigured", extra=build_log_event("function.misconfigured", context, error=str(exc)))
        return error_response(str(exc), 500)

    try:
        payload = await read_json_object(request)
        invoice_id = payload.get("invoiceId")
        if not invoice_id or not isinstance(invoice_id, str):
            raise ValidationError("invoiceId is required")

        context = LogContext(
            function_name=FUNCTION_NAME,
            request_id=context.request_id,
            user_id=context.user_id,
            entity_type="invoice",
            entity_id=invoice_id,
        )
        logger.info("function.started", extra=build_log_event("function.started", context))

        service = InvoiceNotificationService(db, sender=sender, config=config)
        await run_in_threadpool(service.send_invoice, invoice_id, context.user_id)
    except ValidationError as exc:
        return error_response(str(exc), 400)
    except NotFoundError as exc:
        logger.info("function.not_found", extra=build_log_event("function.not_found", context))
        return error_response(str(exc), 404)
    except (UpstreamServiceError, DatabaseError, ConflictError, SQLAlchemyError) as exc:
        logger.warning("function.failed", extra=build_log_event("function.failed", context, error=str(exc)))
        return error_response(str(exc), 400)
    except Exception as exc:
        logger.exception("function.crashed", extra=build_log_event("function.crashed", context))
        return error_response(str(exc), 500, details=traceback.format_exc() if config.DEBUG else None)

    logger.info("function.finished", extra=build_log_event("function.finished", context, status="sent"))
    return json_response({"message": "Invoice sent successfully"})

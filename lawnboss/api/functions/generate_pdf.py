"""``generate-pdf`` function: print an invoice or estimate to PDF."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from lawnboss.api.cors import CORS_HEADERS, error_response, preflight_response
from lawnboss.api.functions._body import read_json_object
from lawnboss.core.config import get_config
from lawnboss.core.enums import DocumentType
from lawnboss.core.exceptions import ValidationError
from lawnboss.core.logging import LogContext, build_log_event
from lawnboss.database.db import get_db
from lawnboss.schemas.common import ErrorEnvelope
from lawnboss.services.document_renderer import DocumentService, PdfRenderer, WeasyPrintRenderer

logger = logging.getLogger(__name__)

FUNCTION_NAME = "generate-pdf"
DOCUMENT_TYPES = {item.value for item in DocumentType}

router = APIRouter(tags=["functions"])


def get_pdf_renderer() -> PdfRenderer:
    return WeasyPrintRenderer()


@router.options(f"/{FUNCTION_NAME}", include_in_schema=False)
async def generate_pdf_preflight() -> Response:
    return preflight_response()


@router.post(
    f"/{FUNCTION_NAME}",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}, 400: {"model": ErrorEnvelope}},
)
async def generate_pdf(
    request: Request,
    db: Session = Depends(get_db),
    renderer: PdfRenderer = Depends(get_pdf_renderer),
) -> Response:
    context = LogContext(function_name=FUNCTION_NAME, user_id=request.headers.get("x-user-id"))
    try:
        payload = await read_json_object(request)
        document_type = payload.get("type")
        document_id = payload.get("id")
        template = payload.get("template")
        if document_type not in DOCUMENT_TYPES or not document_id or not isinstance(document_id, str):
            raise ValidationError("Invalid request parameters")
        if template is not None and not isinstance(template, str):
            raise ValidationError("Invalid request parameters")

        context = LogContext(
            function_name=FUNCTION_NAME,
            request_id=context.request_id,
            user_id=context.user_id,
            entity_type=document_type,
            entity_id=document_id,
        )
        logger.info("function.started", extra=build_log_event("function.started", context))

        service = DocumentService(db, renderer=renderer, config=get_config())
        html = await run_in_threadpool(service.build_html, document_type, document_id, template)
        pdf = await run_in_threadpool(service.render_pdf, html)
    except Exception as exc:
        logger.warning("function.failed", extra=build_log_event("function.failed", context, error=str(exc)))
        return error_response(str(exc), 400)

    logger.info("function.finished", extra=build_log_event("function.finished", context, size_bytes=len(pdf)))
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={
            **CORS_HEADERS,
            "Content-Disposition": f'attachment; filename="{document_type}_{document_id}.pdf"',
        },
    )

"""Router for the stand-alone HTTP functions."""

from __future__ import annotations

from fastapi import APIRouter

from lawnboss.api.functions import generate_pdf, send_invoice_email
from lawnboss.core.config import get_config


def get_functions_router() -> APIRouter:
    functions_router = APIRouter(prefix=get_config().FUNCTIONS_PREFIX)
    functions_router.include_router(send_invoice_email.router)
    functions_router.include_router(generate_pdf.router)
    return functions_router

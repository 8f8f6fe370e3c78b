"""Invoice endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from lawnboss.api.v1._errors import SERVICE_ERRORS, map_service_error
from lawnboss.database.db import get_db
from lawnboss.schemas.invoices import (
    EstimateResponse,
    InvoiceResponse,
    InvoiceStatusUpdateRequest,
    PaymentCreateRequest,
)
from lawnboss.services.estimate_service import EstimateService
from lawnboss.services.invoice_service import InvoiceService

router = APIRouter(tags=["invoices"])


@router.get("/invoices", response_model=list[InvoiceResponse])
def list_invoices(
    status_filter: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
) -> list[InvoiceResponse]:
    try:
        invoices = InvoiceService(db).list_invoices(status=status_filter)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [InvoiceResponse.model_validate(invoice) for invoice in invoices]


@router.get("/invoices/{invoice_id}", response_model=InvoiceResponse)
def get_invoice(invoice_id: str, db: Session = Depends(get_db)) -> InvoiceResponse:
    try:
        invoice = InvoiceService(db).get_invoice(invoice_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return InvoiceResponse.model_validate(invoice)


@router.patch("/invoices/{invoice_id}/status", response_model=InvoiceResponse)
def update_invoice_status(
    invoice_id: str,
    payload: InvoiceStatusUpdateRequest,
    db: Session = Depends(get_db),
) -> InvoiceResponse:
    try:
        invoice = InvoiceService(db).update_status(invoice_id, payload.status)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return InvoiceResponse.model_validate(invoice)


@router.post("/invoices/{invoice_id}/payments", response_model=InvoiceResponse)
def record_payment(
    invoice_id: str,
    payload: PaymentCreateRequest,
    db: Session = Depends(get_db),
) -> InvoiceResponse:
    try:
        invoice = InvoiceService(db).record_payment(
            invoice_id,
            amount=payload.amount,
            payment_method=payload.payment_method,
            payment_date=payload.payment_date,
        )
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return InvoiceResponse.model_validate(invoice)


@router.get("/estimates/{estimate_id}", response_model=EstimateResponse)
def get_estimate(estimate_id: str, db: Session = Depends(get_db)) -> EstimateResponse:
    try:
        estimate = EstimateService(db).get_estimate(estimate_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return EstimateResponse.model_validate(estimate)

"""Service schedule endpoints for API v1."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from lawnboss.api.v1._errors import SERVICE_ERRORS, map_service_error
from lawnboss.database.db import get_db
from lawnboss.schemas.invoices import InvoiceResponse
from lawnboss.schemas.schedules import (
    ServiceScheduleCreateRequest,
    ServiceScheduleResponse,
    ServiceStatusUpdateRequest,
    ServiceStatusUpdateResponse,
)
from lawnboss.services.schedule_service import ScheduleService
from lawnboss.services.service_completion import ServiceCompletionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=list[ServiceScheduleResponse])
def list_services(
    status_filter: str | None = Query(default=None, alias="status"),
    db: Session = Depends(get_db),
) -> list[ServiceScheduleResponse]:
    try:
        records = ScheduleService(db).list_services(status=status_filter)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [ServiceScheduleResponse.model_validate(record) for record in records]


@router.get("/{service_id}", response_model=ServiceScheduleResponse)
def get_service(service_id: str, db: Session = Depends(get_db)) -> ServiceScheduleResponse:
    try:
        record = ScheduleService(db).get_service(service_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return ServiceScheduleResponse.model_validate(record)


@router.post("", response_model=ServiceScheduleResponse, status_code=status.HTTP_201_CREATED)
def schedule_service(payload: ServiceScheduleCreateRequest, db: Session = Depends(get_db)) -> ServiceScheduleResponse:
    try:
        record = ScheduleService(db).schedule_service(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return ServiceScheduleResponse.model_validate(record)


@router.patch("/{service_id}/status", response_model=ServiceStatusUpdateResponse)
def update_service_status(
    service_id: str,
    payload: ServiceStatusUpdateRequest,
    db: Session = Depends(get_db),
) -> ServiceStatusUpdateResponse:
    try:
        result = ServiceCompletionService(db).update_status(service_id, payload.status)
    except SERVICE_ERRORS as exc:
        logger.warning(
            "service.status_change_failed",
            extra={"event": "service.status_change_failed", "entity_id": service_id, "error": str(exc)},
        )
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return ServiceStatusUpdateResponse(
        service=ServiceScheduleResponse.model_validate(result.service),
        invoice=InvoiceResponse.model_validate(result.invoice) if result.invoice is not None else None,
    )

"""Technician and service type endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from lawnboss.api.v1._errors import SERVICE_ERRORS, map_service_error
from lawnboss.database.db import get_db
from lawnboss.schemas.customers import TechnicianCreateRequest, TechnicianResponse
from lawnboss.schemas.schedules import ServiceTypeResponse
from lawnboss.services.technician_service import ServiceTypeService, TechnicianService

router = APIRouter(tags=["technicians"])


@router.get("/technicians", response_model=list[TechnicianResponse])
def list_technicians(db: Session = Depends(get_db)) -> list[TechnicianResponse]:
    try:
        records = TechnicianService(db).list_technicians()
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [TechnicianResponse.model_validate(record) for record in records]


@router.post("/technicians", response_model=TechnicianResponse, status_code=status.HTTP_201_CREATED)
def create_technician(payload: TechnicianCreateRequest, db: Session = Depends(get_db)) -> TechnicianResponse:
    try:
        record = TechnicianService(db).add_technician(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return TechnicianResponse.model_validate(record)


@router.get("/service-types", response_model=list[ServiceTypeResponse])
def list_service_types(db: Session = Depends(get_db)) -> list[ServiceTypeResponse]:
    try:
        records = ServiceTypeService(db).list_service_types()
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [ServiceTypeResponse.model_validate(record) for record in records]

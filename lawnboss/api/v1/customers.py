"""Customer and property endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from lawnboss.api.v1._errors import SERVICE_ERRORS, map_service_error
from lawnboss.database.db import get_db
from lawnboss.schemas.customers import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerUpdateRequest,
    PropertyCreateRequest,
    PropertyResponse,
    PropertyUpdateRequest,
)
from lawnboss.services.customer_service import CustomerService
from lawnboss.services.property_service import PropertyService

router = APIRouter(tags=["customers"])


@router.get("/customers", response_model=list[CustomerResponse])
def list_customers(
    include_inactive: bool = Query(default=False),
    db: Session = Depends(get_db),
) -> list[CustomerResponse]:
    try:
        customers = CustomerService(db).list_customers(include_inactive=include_inactive)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [CustomerResponse.model_validate(customer) for customer in customers]


@router.get("/customers/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: str, db: Session = Depends(get_db)) -> CustomerResponse:
    try:
        customer = CustomerService(db).get_customer(customer_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CustomerResponse.model_validate(customer)


@router.post("/customers", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerCreateRequest, db: Session = Depends(get_db)) -> CustomerResponse:
    try:
        customer = CustomerService(db).add_customer(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CustomerResponse.model_validate(customer)


@router.patch("/customers/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: str,
    payload: CustomerUpdateRequest,
    db: Session = Depends(get_db),
) -> CustomerResponse:
    try:
        customer = CustomerService(db).update_customer(customer_id, payload.model_dump(exclude_unset=True))
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CustomerResponse.model_validate(customer)


@router.get("/properties", response_model=list[PropertyResponse])
def list_properties(
    customer_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[PropertyResponse]:
    try:
        records = PropertyService(db).list_properties(customer_id=customer_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [PropertyResponse.model_validate(record) for record in records]


@router.post("/properties", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(payload: PropertyCreateRequest, db: Session = Depends(get_db)) -> PropertyResponse:
    try:
        record = PropertyService(db).add_property(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return PropertyResponse.model_validate(record)


@router.patch("/properties/{property_id}", response_model=PropertyResponse)
def update_property(
    property_id: str,
    payload: PropertyUpdateRequest,
    db: Session = Depends(get_db),
) -> PropertyResponse:
    try:
        record = PropertyService(db).update_property(property_id, payload.model_dump(exclude_unset=True))
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return PropertyResponse.model_validate(record)

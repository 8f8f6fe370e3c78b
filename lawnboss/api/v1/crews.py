"""Crew endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from lawnboss.api.v1._errors import SERVICE_ERRORS, map_service_error
from lawnboss.database.db import get_db
from lawnboss.schemas.crews import (
    CrewAssignmentCreateRequest,
    CrewAssignmentResponse,
    CrewAssignmentStatusUpdateRequest,
    CrewCreateRequest,
    CrewMemberCreateRequest,
    CrewMemberResponse,
    CrewMemberUpdateRequest,
    CrewResponse,
    CrewStatusUpdateRequest,
)
from lawnboss.services.crew_service import CrewService

router = APIRouter(prefix="/crews", tags=["crews"])


@router.get("", response_model=list[CrewResponse])
def list_crews(db: Session = Depends(get_db)) -> list[CrewResponse]:
    try:
        crews = CrewService(db).list_crews()
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [CrewResponse.model_validate(crew) for crew in crews]


@router.post("", response_model=CrewResponse, status_code=status.HTTP_201_CREATED)
def create_crew(payload: CrewCreateRequest, db: Session = Depends(get_db)) -> CrewResponse:
    try:
        crew = CrewService(db).add_crew(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CrewResponse.model_validate(crew)


@router.get("/members", response_model=list[CrewMemberResponse])
def list_members(
    crew_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[CrewMemberResponse]:
    try:
        members = CrewService(db).list_members(crew_id=crew_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [CrewMemberResponse.model_validate(member) for member in members]


@router.post("/members", response_model=CrewMemberResponse, status_code=status.HTTP_201_CREATED)
def add_member(payload: CrewMemberCreateRequest, db: Session = Depends(get_db)) -> CrewMemberResponse:
    try:
        member = CrewService(db).add_member(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CrewMemberResponse.model_validate(member)


@router.patch("/members/{member_id}", response_model=CrewMemberResponse)
def update_member(
    member_id: str,
    payload: CrewMemberUpdateRequest,
    db: Session = Depends(get_db),
) -> CrewMemberResponse:
    try:
        member = CrewService(db).update_member(member_id, payload.model_dump(exclude_unset=True))
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CrewMemberResponse.model_validate(member)


@router.get("/assignments", response_model=list[CrewAssignmentResponse])
def list_assignments(
    crew_id: str | None = Query(default=None),
    db: Session = Depends(get_db),
) -> list[CrewAssignmentResponse]:
    try:
        assignments = CrewService(db).list_assignments(crew_id=crew_id)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [CrewAssignmentResponse.model_validate(assignment) for assignment in assignments]


@router.post("/assignments", response_model=CrewAssignmentResponse, status_code=status.HTTP_201_CREATED)
def assign_crew(payload: CrewAssignmentCreateRequest, db: Session = Depends(get_db)) -> CrewAssignmentResponse:
    try:
        assignment = CrewService(db).assign_crew(payload.model_dump())
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CrewAssignmentResponse.model_validate(assignment)


@router.patch("/assignments/{assignment_id}/status", response_model=CrewAssignmentResponse)
def update_assignment_status(
    assignment_id: str,
    payload: CrewAssignmentStatusUpdateRequest,
    db: Session = Depends(get_db),
) -> CrewAssignmentResponse:
    try:
        assignment = CrewService(db).update_assignment_status(assignment_id, payload.status)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CrewAssignmentResponse.model_validate(assignment)


@router.patch("/{crew_id}/status", response_model=CrewResponse)
def update_crew_status(
    crew_id: str,
    payload: CrewStatusUpdateRequest,
    db: Session = Depends(get_db),
) -> CrewResponse:
    try:
        crew = CrewService(db).update_crew_status(crew_id, payload.status)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return CrewResponse.model_validate(crew)

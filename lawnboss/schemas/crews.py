"""Crew request/response schemas."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from lawnboss.core.enums import AssignmentStatus, CrewRole, RecordStatus
from lawnboss.schemas.customers import TechnicianResponse


class CrewCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)


class CrewStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: RecordStatus


class CrewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None = None
    status: str


class CrewMemberCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    crew_id: str
    technician_id: str
    role: CrewRole = CrewRole.CREW_MEMBER.value
    is_primary_crew: bool = False
    start_date: date | None = None


class CrewMemberUpdateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    role: CrewRole | None = None
    is_primary_crew: bool | None = None
    end_date: date | None = None


class CrewMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    crew_id: str
    technician_id: str
    role: str
    is_primary_crew: bool
    start_date: date
    end_date: date | None = None
    technician: TechnicianResponse | None = None


class CrewAssignmentCreateRequest(BaseModel):
    crew_id: str
    service_schedule_id: str
    notes: str | None = Field(default=None, max_length=5000)


class CrewAssignmentStatusUpdateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    status: AssignmentStatus


class CrewAssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    crew_id: str
    service_schedule_id: str
    assigned_at: datetime
    status: str
    notes: str | None = None
    crew: CrewResponse | None = None

"""Crew service: crews, memberships and schedule assignments."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from sqlalchemy.orm import joinedload

from lawnboss.core.enums import AssignmentStatus, CrewRole, RecordStatus
from lawnboss.core.exceptions import ConflictError, ValidationError
from lawnboss.core.state_machine import ASSIGNMENT_STATUS_MACHINE
from lawnboss.models import Crew, CrewAssignment, CrewMember, ServiceSchedule, Technician
from lawnboss.services.base_service import BaseService
from lawnboss.utils.validators import clean_optional, sanitize_text

logger = logging.getLogger(__name__)

MEMBER_UPDATABLE_FIELDS = ("role", "is_primary_crew", "end_date")


class CrewService(BaseService):
    """Service for crews and their members and assignments."""

    def list_crews(self) -> list[Crew]:
        return self.db.query(Crew).order_by(Crew.name.asc()).all()

    def get_crew(self, crew_id: str) -> Crew:
        return self.get_or_raise(Crew, crew_id, "Crew")

    def add_crew(self, data: dict[str, Any]) -> Crew:
        name = sanitize_text(data.get("name"))
        if not name:
            raise ValidationError("Crew name is required")
        crew = Crew(name=name, description=clean_optional(data.get("description")), status=RecordStatus.ACTIVE.value)
        return self.save(crew)

    def update_crew_status(self, crew_id: str, status: str) -> Crew:
        if status not in {item.value for item in RecordStatus}:
            raise ValidationError(f"Unknown crew status: {status}")
        return self.apply_updates(self.get_crew(crew_id), {"status": status})

    def list_members(self, crew_id: str | None = None) -> list[CrewMember]:
        query = self.db.query(CrewMember).options(joinedload(CrewMember.technician))
        if crew_id:
            query = query.filter(CrewMember.crew_id == crew_id)
        return query.order_by(CrewMember.created_at.desc()).all()

    def add_member(self, data: dict[str, Any]) -> CrewMember:
        self.get_crew(data.get("crew_id") or "")
        self.get_or_raise(Technician, data.get("technician_id") or "", "Technician")
        role = data.get("role") or CrewRole.CREW_MEMBER.value
        if role not in {item.value for item in CrewRole}:
            raise ValidationError(f"Unknown crew role: {role}")
        member = CrewMember(
            crew_id=data["crew_id"],
            technician_id=data["technician_id"],
            role=role,
            is_primary_crew=bool(data.get("is_primary_crew", False)),
            start_date=data.get("start_date") or date.today(),
        )
        return self.save(member)

    def update_member(self, member_id: str, updates: dict[str, Any]) -> CrewMember:
        member = self.get_or_raise(CrewMember, member_id, "Crew member")
        unknown = set(updates) - set(MEMBER_UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Fields cannot be updated: {', '.join(sorted(unknown))}")
        if "role" in updates and updates["role"] not in {item.value for item in CrewRole}:
            raise ValidationError(f"Unknown crew role: {updates['role']}")
        return self.apply_updates(member, updates)

    def list_assignments(self, crew_id: str | None = None) -> list[CrewAssignment]:
        query = self.db.query(CrewAssignment).options(
            joinedload(CrewAssignment.crew),
            joinedload(CrewAssignment.service_schedule),
        )
        if crew_id:
            query = query.filter(CrewAssignment.crew_id == crew_id)
        return query.order_by(CrewAssignment.assigned_at.desc()).all()

    def assign_crew(self, data: dict[str, Any]) -> CrewAssignment:
        crew_id = data.get("crew_id") or ""
        schedule_id = data.get("service_schedule_id") or ""
        self.get_crew(crew_id)
        self.get_or_raise(ServiceSchedule, schedule_id, "Service")
        existing = (
            self.db.query(CrewAssignment)
            .filter(CrewAssignment.crew_id == crew_id, CrewAssignment.service_schedule_id == schedule_id)
            .first()
        )
        if existing is not None:
            raise ConflictError("Crew is already assigned to this service")

        assignment = CrewAssignment(
            crew_id=crew_id,
            service_schedule_id=schedule_id,
            status=AssignmentStatus.PENDING.value,
            notes=clean_optional(data.get("notes")),
        )
        assignment = self.save(assignment)
        logger.info(
            "crew.assigned",
            extra={"event": "crew.assigned", "crew_id": crew_id, "service_schedule_id": schedule_id},
        )
        return assignment

    def update_assignment_status(self, assignment_id: str, status: str) -> CrewAssignment:
        assignment = self.get_or_raise(CrewAssignment, assignment_id, "Crew assignment")
        ASSIGNMENT_STATUS_MACHINE.assert_transition(assignment.status, status)
        return self.apply_updates(assignment, {"status": status})

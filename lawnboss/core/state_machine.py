"""Status transition rules for service schedules, invoices and crew assignments."""

from __future__ import annotations

from lawnboss.core.enums import AssignmentStatus, InvoiceStatus, ServiceStatus
from lawnboss.core.exceptions import ConflictError


class InvalidTransitionError(ConflictError):
    """Raised when a disallowed state transition is attempted."""


class StateMachine:
    """Allowed-transition table keyed by the current status."""

    def __init__(self, transitions: dict[str, set[str]]) -> None:
        self._transitions = transitions

    @property
    def states(self) -> set[str]:
        states = set(self._transitions)
        for targets in self._transitions.values():
            states |= targets
        return states

    def can_transition(self, current: str, target: str) -> bool:
        return target in self._transitions.get(current, set())

    def assert_transition(self, current: str, target: str) -> None:
        if not self.can_transition(current=current, target=target):
            raise InvalidTransitionError(f"Transition not allowed: {current} -> {target}")


SERVICE_STATUS_MACHINE = StateMachine(
    {
        ServiceStatus.PENDING.value: {
            ServiceStatus.IN_PROGRESS.value,
            ServiceStatus.COMPLETED.value,
            ServiceStatus.CANCELLED.value,
        },
        ServiceStatus.IN_PROGRESS.value: {
            ServiceStatus.PENDING.value,
            ServiceStatus.COMPLETED.value,
            ServiceStatus.CANCELLED.value,
        },
        ServiceStatus.COMPLETED.value: set(),
        ServiceStatus.CANCELLED.value: set(),
    }
)

INVOICE_STATUS_MACHINE = StateMachine(
    {
        InvoiceStatus.DRAFT.value: {InvoiceStatus.SENT.value, InvoiceStatus.CANCELLED.value},
        InvoiceStatus.SENT.value: {
            InvoiceStatus.PAID.value,
            InvoiceStatus.OVERDUE.value,
            InvoiceStatus.CANCELLED.value,
        },
        InvoiceStatus.OVERDUE.value: {InvoiceStatus.PAID.value, InvoiceStatus.CANCELLED.value},
        InvoiceStatus.PAID.value: set(),
        InvoiceStatus.CANCELLED.value: set(),
    }
)

ASSIGNMENT_STATUS_MACHINE = StateMachine(
    {
        AssignmentStatus.PENDING.value: {AssignmentStatus.ACCEPTED.value, AssignmentStatus.CANCELLED.value},
        AssignmentStatus.ACCEPTED.value: {AssignmentStatus.COMPLETED.value, AssignmentStatus.CANCELLED.value},
        AssignmentStatus.COMPLETED.value: set(),
        AssignmentStatus.CANCELLED.value: set(),
    }
)

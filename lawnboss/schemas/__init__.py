"""Pydantic schema package for API contracts."""

from lawnboss.schemas.common import ErrorEnvelope
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
from lawnboss.schemas.customers import (
    CustomerCreateRequest,
    CustomerResponse,
    CustomerSummary,
    CustomerUpdateRequest,
    PropertyCreateRequest,
    PropertyResponse,
    PropertyUpdateRequest,
    TechnicianCreateRequest,
    TechnicianResponse,
)
from lawnboss.schemas.invoices import (
    EstimateResponse,
    InvoiceItemResponse,
    InvoiceResponse,
    InvoiceStatusUpdateRequest,
    PaymentCreateRequest,
)
from lawnboss.schemas.messages import ChangeEventResponse, MessageRecipientResponse, MessageResponse
from lawnboss.schemas.schedules import (
    ServiceScheduleCreateRequest,
    ServiceScheduleResponse,
    ServiceStatusUpdateRequest,
    ServiceStatusUpdateResponse,
    ServiceTypeResponse,
)

__all__ = [
    "ChangeEventResponse",
    "CrewAssignmentCreateRequest",
    "CrewAssignmentResponse",
    "CrewAssignmentStatusUpdateRequest",
    "CrewCreateRequest",
    "CrewMemberCreateRequest",
    "CrewMemberResponse",
    "CrewMemberUpdateRequest",
    "CrewResponse",
    "CrewStatusUpdateRequest",
    "CustomerCreateRequest",
    "CustomerResponse",
    "CustomerSummary",
    "CustomerUpdateRequest",
    "ErrorEnvelope",
    "EstimateResponse",
    "InvoiceItemResponse",
    "InvoiceResponse",
    "InvoiceStatusUpdateRequest",
    "MessageRecipientResponse",
    "MessageResponse",
    "PaymentCreateRequest",
    "PropertyCreateRequest",
    "PropertyResponse",
    "PropertyUpdateRequest",
    "ServiceScheduleCreateRequest",
    "ServiceScheduleResponse",
    "ServiceStatusUpdateRequest",
    "ServiceStatusUpdateResponse",
    "ServiceTypeResponse",
    "TechnicianCreateRequest",
    "TechnicianResponse",
]

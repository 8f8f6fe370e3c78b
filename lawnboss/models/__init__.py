"""SQLAlchemy model package for the LawnBoss schema."""

from lawnboss.models.base import Base
from lawnboss.models.crew import Crew, CrewAssignment, CrewMember
from lawnboss.models.customer import Customer, Property
from lawnboss.models.estimate import Estimate, EstimateItem
from lawnboss.models.invoice import Invoice, InvoiceItem
from lawnboss.models.message import Message, MessageRecipient
from lawnboss.models.service import ServiceSchedule, ServiceType
from lawnboss.models.tax import TaxConfiguration
from lawnboss.models.technician import Technician

__all__ = [
    "Base",
    "Crew",
    "CrewAssignment",
    "CrewMember",
    "Customer",
    "Estimate",
    "EstimateItem",
    "Invoice",
    "InvoiceItem",
    "Message",
    "MessageRecipient",
    "Property",
    "ServiceSchedule",
    "ServiceType",
    "TaxConfiguration",
    "Technician",
]

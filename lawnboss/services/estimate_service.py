"""Estimate reads."""

from __future__ import annotations

from sqlalchemy.orm import joinedload, selectinload

from lawnboss.core.exceptions import NotFoundError
from lawnboss.models import Estimate, EstimateItem
from lawnboss.services.base_service import BaseService


class EstimateService(BaseService):
    def get_estimate(self, estimate_id: str) -> Estimate:
        estimate = (
            self.db.query(Estimate)
            .options(
                joinedload(Estimate.customer),
                joinedload(Estimate.property),
                selectinload(Estimate.items).joinedload(EstimateItem.service_type),
            )
            .filter(Estimate.id == estimate_id)
            .first()
        )
        if estimate is None:
            raise NotFoundError("Estimate not found")
        return estimate

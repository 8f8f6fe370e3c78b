"""Default tax rate lookup and tax arithmetic."""

from __future__ import annotations

import logging
from typing import NamedTuple

from sqlalchemy.exc import MultipleResultsFound, SQLAlchemyError

from lawnboss.models import TaxConfiguration
from lawnboss.services.base_service import BaseService
from lawnboss.utils.validators import round_money

logger = logging.getLogger(__name__)


class TaxBreakdown(NamedTuple):
    rate: float
    subtotal: float
    tax_amount: float
    total: float


def calculate_tax(base_amount: float | None, rate: float) -> TaxBreakdown:
    """Apply ``rate`` to ``base_amount``; a missing amount counts as zero."""
    subtotal = round_money(base_amount or 0)
    tax_amount = round_money(subtotal * rate)
    return TaxBreakdown(rate=rate, subtotal=subtotal, tax_amount=tax_amount, total=round_money(subtotal + tax_amount))


class TaxService(BaseService):
    def get_default_configuration(self) -> TaxConfiguration | None:
        return self.db.query(TaxConfiguration).filter(TaxConfiguration.is_default.is_(True)).one_or_none()

    def get_default_rate(self) -> float:
        """Rate of the single default configuration, 0 when it cannot be resolved.

        A failed query rolls the session back, since PostgreSQL refuses every
        later statement in an aborted transaction. Call it before staging writes.
        """
        try:
            config = self.get_default_configuration()
        except MultipleResultsFound:
            logger.warning("tax.default.ambiguous", extra={"event": "tax.default.ambiguous"})
            return 0.0
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("tax.default.lookup_failed", extra={"event": "tax.default.lookup_failed", "error": str(exc)})
            return 0.0
        if config is None:
            logger.warning("tax.default.missing", extra={"event": "tax.default.missing"})
            return 0.0
        return float(config.rate)

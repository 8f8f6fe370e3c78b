"""Translate service-layer exceptions into HTTP status codes."""

from __future__ import annotations

from fastapi import status
from sqlalchemy.exc import SQLAlchemyError

from lawnboss.core.exceptions import (
    ConflictError,
    DatabaseError,
    LawnBossException,
    NotFoundError,
    ValidationError,
)

SERVICE_ERRORS = (LawnBossException, SQLAlchemyError)


def map_service_error(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND, str(exc)
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST, str(exc)
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT, str(exc)
    if isinstance(exc, (DatabaseError, SQLAlchemyError)):
        return status.HTTP_400_BAD_REQUEST, str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc)

"""Root API router for v1 endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from lawnboss.api.v1 import crews, customers, health, invoices, messages, services, technicians
from lawnboss.core.config import get_config


def get_api_router() -> APIRouter:
    api_router = APIRouter(prefix=get_config().API_PREFIX)
    api_router.include_router(health.router)
    api_router.include_router(customers.router)
    api_router.include_router(technicians.router)
    api_router.include_router(crews.router)
    api_router.include_router(services.router)
    api_router.include_router(invoices.router)
    api_router.include_router(messages.router)
    return api_router

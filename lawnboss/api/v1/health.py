"""Health endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter

from lawnboss.core.config import get_config
from lawnboss.realtime import get_change_feed

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict:
    cfg = get_config()
    return {
        "status": "ok",
        "service": cfg.APP_NAME,
        "version": cfg.APP_VERSION,
        "email_configured": cfg.email_configured,
        "change_feed_version": get_change_feed().latest_version,
    }

"""Message audit trail and change feed endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from lawnboss.api.v1._errors import SERVICE_ERRORS, map_service_error
from lawnboss.database.db import get_db
from lawnboss.realtime import get_change_feed
from lawnboss.schemas.messages import ChangeEventResponse, MessageResponse
from lawnboss.services.message_service import MessageService

router = APIRouter(tags=["messages"])


@router.get("/messages", response_model=list[MessageResponse])
def list_messages(
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
) -> list[MessageResponse]:
    try:
        messages = MessageService(db).list_messages(limit=limit, offset=offset)
    except SERVICE_ERRORS as exc:
        code, detail = map_service_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return [MessageResponse.model_validate(message) for message in messages]


@router.get("/changes")
def list_changes(
    since: int = Query(default=0, ge=0),
    table: str | None = Query(default=None),
) -> dict:
    feed = get_change_feed()
    events = feed.events_since(since, table=table)
    return {
        "items": [ChangeEventResponse.model_validate(change).model_dump(mode="json") for change in events],
        "latest_version": feed.latest_version,
    }

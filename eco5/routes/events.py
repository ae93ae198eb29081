"""
Community events.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from eco5.auth import get_current_user
from eco5.db import DbClient, UserRecord
from eco5.dependencies import get_db_client
from eco5.errors import NotFound
from eco5.routes.common import require_found, require_update_fields, require_user
from eco5.schemas import (
    DeleteResponse,
    EventCreatePayload,
    EventResponse,
    EventUpdatePayload,
    Pagination,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/events", tags=["events"], dependencies=[Depends(get_current_user)]
)


@router.get("", response_model=list[EventResponse])
def list_events(
    page: Annotated[Pagination, Query()], db: DbClient = Depends(get_db_client)
):
    """Events in date order, earliest first."""
    events = db.list_events(limit=page.limit, offset=page.offset)
    return [event.as_dict() for event in events]


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, db: DbClient = Depends(get_db_client)):
    event = require_found(db.get_event(event_id), "Event not found", "EVENT_NOT_FOUND")
    return event.as_dict()


@router.post("", response_model=EventResponse, status_code=201)
def create_event(
    payload: EventCreatePayload,
    current_user: UserRecord = Depends(get_current_user),
    db: DbClient = Depends(get_db_client),
):
    organizer_id = payload.organizer_id or current_user.id
    require_user(db, organizer_id)
    event = db.create_event(
        payload.event_name, payload.event_date, organizer_id, payload.location
    )
    return event.as_dict()


@router.patch("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: str,
    payload: EventUpdatePayload,
    db: DbClient = Depends(get_db_client),
):
    fields = require_update_fields(payload)
    if "organizer_id" in fields:
        require_user(db, fields["organizer_id"])
    event = require_found(
        db.update_event(event_id, fields), "Event not found", "EVENT_NOT_FOUND"
    )
    return event.as_dict()


@router.delete("/{event_id}", response_model=DeleteResponse)
def delete_event(
    event_id: str,
    current_user: UserRecord = Depends(get_current_user),
    db: DbClient = Depends(get_db_client),
):
    if not db.delete_event(event_id):
        raise NotFound("Event not found", error_code="EVENT_NOT_FOUND")
    logger.info("Event %s deleted by user %s", event_id, current_user.id)
    return DeleteResponse(success=True, id=event_id)

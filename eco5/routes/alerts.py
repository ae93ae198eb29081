"""
User alerts and reminders.

``GET``/``POST /alerts/{user_id}`` address a user's alerts, while
``PATCH /alerts/{alert_id}`` addresses a single alert.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from eco5.auth import get_current_user
from eco5.db import DbClient
from eco5.dependencies import get_db_client
from eco5.routes.common import require_found, require_update_fields, require_user
from eco5.schemas import (
    AlertCreatePayload,
    AlertResponse,
    AlertUpdatePayload,
    Pagination,
)

router = APIRouter(
    prefix="/alerts", tags=["alerts"], dependencies=[Depends(get_current_user)]
)


@router.get("/{user_id}", response_model=list[AlertResponse])
def list_alerts(
    user_id: str,
    page: Annotated[Pagination, Query()],
    db: DbClient = Depends(get_db_client),
):
    alerts = db.list_alerts(user_id, limit=page.limit, offset=page.offset)
    return [alert.as_dict() for alert in alerts]


@router.post("/{user_id}", response_model=AlertResponse, status_code=201)
def create_alert(
    user_id: str,
    payload: AlertCreatePayload,
    db: DbClient = Depends(get_db_client),
):
    require_user(db, user_id)
    alert = db.create_alert(
        user_id, payload.alert_type, payload.message, payload.created_at
    )
    return alert.as_dict()


@router.patch("/{alert_id}", response_model=AlertResponse)
def update_alert(
    alert_id: str,
    payload: AlertUpdatePayload,
    db: DbClient = Depends(get_db_client),
):
    fields = require_update_fields(payload)
    alert = require_found(
        db.update_alert(alert_id, fields), "Alert not found", "ALERT_NOT_FOUND"
    )
    return alert.as_dict()

"""
Community forum threads.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from eco5.auth import get_current_user
from eco5.db import DbClient, UserRecord
from eco5.dependencies import get_db_client
from eco5.routes.common import require_found, require_update_fields, require_user
from eco5.schemas import (
    ForumThreadCreatePayload,
    ForumThreadResponse,
    ForumThreadUpdatePayload,
    Pagination,
)

router = APIRouter(
    prefix="/community-forum",
    tags=["community-forum"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ForumThreadResponse])
def list_threads(
    page: Annotated[Pagination, Query()], db: DbClient = Depends(get_db_client)
):
    """Newest threads first."""
    threads = db.list_forum_threads(limit=page.limit, offset=page.offset)
    return [thread.as_dict() for thread in threads]


@router.get("/{thread_id}", response_model=ForumThreadResponse)
def get_thread(thread_id: str, db: DbClient = Depends(get_db_client)):
    thread = require_found(
        db.get_forum_thread(thread_id), "Forum thread not found", "THREAD_NOT_FOUND"
    )
    return thread.as_dict()


@router.post("", response_model=ForumThreadResponse, status_code=201)
def create_thread(
    payload: ForumThreadCreatePayload,
    current_user: UserRecord = Depends(get_current_user),
    db: DbClient = Depends(get_db_client),
):
    user_id = payload.user_id or current_user.id
    require_user(db, user_id)
    thread = db.create_forum_thread(
        user_id, payload.thread_title, payload.content, payload.created_at
    )
    return thread.as_dict()


@router.patch("/{thread_id}", response_model=ForumThreadResponse)
def update_thread(
    thread_id: str,
    payload: ForumThreadUpdatePayload,
    db: DbClient = Depends(get_db_client),
):
    fields = require_update_fields(payload)
    thread = require_found(
        db.update_forum_thread(thread_id, fields),
        "Forum thread not found",
        "THREAD_NOT_FOUND",
    )
    return thread.as_dict()

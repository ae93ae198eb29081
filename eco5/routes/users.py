"""
User profiles and search.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from eco5.auth import get_current_user, hash_password
from eco5.config import Settings, get_settings
from eco5.db import DbClient, UserRecord
from eco5.dependencies import get_db_client
from eco5.errors import Forbidden, UserAlreadyExists
from eco5.routes.auth import normalize_email
from eco5.routes.common import require_found, require_update_fields
from eco5.schemas import UserResponse, UserSearchParams, UserUpdatePayload

router = APIRouter(
    prefix="/users", tags=["users"], dependencies=[Depends(get_current_user)]
)


# Declared before /{user_id} so "search" is not taken for an id.
@router.get("/search", response_model=list[UserResponse])
def search_users(
    params: Annotated[UserSearchParams, Query()],
    db: DbClient = Depends(get_db_client),
):
    """
    Case-insensitive substring search over name and email, paginated.
    """
    users = db.search_users(
        params.query,
        limit=params.limit,
        offset=params.offset,
        sort_by=params.sort_by,
        sort_order=params.sort_order,
    )
    return [user.as_dict() for user in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: DbClient = Depends(get_db_client)):
    user = require_found(db.get_user(user_id), "User not found", "USER_NOT_FOUND")
    return user.as_dict()


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    payload: UserUpdatePayload,
    current_user: UserRecord = Depends(get_current_user),
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
):
    """
    Update the caller's own profile. Only supplied fields change.
    """
    if current_user.id != user_id:
        raise Forbidden("Forbidden: Cannot update another user's profile")

    fields = require_update_fields(payload)
    updates = {}
    if "email" in fields:
        email = normalize_email(fields["email"])
        existing = db.get_user_by_email(email)
        if existing and existing.id != user_id:
            raise UserAlreadyExists()
        updates["email"] = email
    if "name" in fields:
        updates["name"] = fields["name"]
    if "password" in fields:
        updates["password_hash"] = hash_password(
            fields["password"], settings.bcrypt_rounds
        )

    user = require_found(
        db.update_user(user_id, updates), "User not found", "USER_NOT_FOUND"
    )
    return user.as_dict()

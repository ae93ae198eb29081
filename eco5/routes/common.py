"""
Helpers shared by the resource routers.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from eco5.db import DbClient, UserRecord
from eco5.errors import NoUpdateFields, NotFound
from eco5.schemas import UpdatePayload

T = TypeVar("T")


def require_found(record: Optional[T], message: str, error_code: str) -> T:
    if record is None:
        raise NotFound(message, error_code=error_code)
    return record


def require_update_fields(payload: UpdatePayload) -> dict:
    """Return the supplied fields, or reject an update that names none."""
    fields = payload.supplied_fields()
    if not fields:
        raise NoUpdateFields()
    return fields


def require_user(db: DbClient, user_id: str) -> UserRecord:
    return require_found(db.get_user(user_id), "User not found", "USER_NOT_FOUND")

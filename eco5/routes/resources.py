"""
Resource library: articles, videos and other learning material.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from eco5.auth import get_current_user
from eco5.db import DbClient, UserRecord
from eco5.dependencies import get_db_client
from eco5.routes.common import require_found, require_update_fields, require_user
from eco5.schemas import (
    ResourceCreatePayload,
    ResourceResponse,
    ResourceSearchParams,
    ResourceUpdatePayload,
)

router = APIRouter(
    prefix="/resource-library",
    tags=["resource-library"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=list[ResourceResponse])
def list_resources(
    params: Annotated[ResourceSearchParams, Query()],
    db: DbClient = Depends(get_db_client),
):
    """
    Resources ordered by title, optionally filtered by content type and a
    case-insensitive title substring.
    """
    resources = db.list_resources(
        content_type=params.content_type,
        query=params.query,
        limit=params.limit,
        offset=params.offset,
    )
    return [resource.as_dict() for resource in resources]


@router.get("/{resource_id}", response_model=ResourceResponse)
def get_resource(resource_id: str, db: DbClient = Depends(get_db_client)):
    resource = require_found(
        db.get_resource(resource_id), "Resource not found", "RESOURCE_NOT_FOUND"
    )
    return resource.as_dict()


@router.post("", response_model=ResourceResponse, status_code=201)
def create_resource(
    payload: ResourceCreatePayload,
    current_user: UserRecord = Depends(get_current_user),
    db: DbClient = Depends(get_db_client),
):
    author_id = payload.author_id or current_user.id
    require_user(db, author_id)
    resource = db.create_resource(
        payload.content_type,
        payload.title,
        author_id,
        description=payload.description,
        content_url=payload.content_url,
    )
    return resource.as_dict()


@router.patch("/{resource_id}", response_model=ResourceResponse)
def update_resource(
    resource_id: str,
    payload: ResourceUpdatePayload,
    db: DbClient = Depends(get_db_client),
):
    fields = require_update_fields(payload)
    if "author_id" in fields:
        require_user(db, fields["author_id"])
    resource = require_found(
        db.update_resource(resource_id, fields),
        "Resource not found",
        "RESOURCE_NOT_FOUND",
    )
    return resource.as_dict()

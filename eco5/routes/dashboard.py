"""
Per-user dashboard of carbon-footprint metrics.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from eco5.auth import get_current_user
from eco5.db import DbClient
from eco5.dependencies import get_db_client
from eco5.routes.common import require_found, require_update_fields
from eco5.schemas import DashboardResponse, DashboardUpdatePayload

router = APIRouter(
    prefix="/dashboard", tags=["dashboard"], dependencies=[Depends(get_current_user)]
)


@router.get("/{user_id}", response_model=DashboardResponse)
def get_dashboard(user_id: str, db: DbClient = Depends(get_db_client)):
    dashboard = require_found(
        db.get_dashboard(user_id), "Dashboard not found", "DASHBOARD_NOT_FOUND"
    )
    return dashboard.as_dict()


@router.patch("/{user_id}", response_model=DashboardResponse)
def update_dashboard(
    user_id: str,
    payload: DashboardUpdatePayload,
    db: DbClient = Depends(get_db_client),
):
    fields = require_update_fields(payload)
    dashboard = require_found(
        db.update_dashboard(user_id, fields),
        "Dashboard not found",
        "DASHBOARD_NOT_FOUND",
    )
    return dashboard.as_dict()

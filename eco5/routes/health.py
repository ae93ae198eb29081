from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response
from sqlalchemy.exc import SQLAlchemyError

from eco5.db import DbClient
from eco5.dependencies import get_db_client
from eco5.schemas import HealthResponse
from eco5.timestamps import utc_now_iso

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(response: Response, db: DbClient = Depends(get_db_client)):
    """Health check endpoint - verifies the database connection."""
    try:
        db.ping()
    except SQLAlchemyError:
        logger.exception("Health check could not reach the database")
        response.status_code = 503
        return HealthResponse(
            status="unhealthy", database="unreachable", timestamp=utc_now_iso()
        )
    return HealthResponse(status="ok", database="connected", timestamp=utc_now_iso())

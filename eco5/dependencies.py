"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from eco5.config import get_settings
from eco5.db import DbClient, SqlDbClient

logger = logging.getLogger(__name__)

_db_client: DbClient | None = None


def get_db_client() -> DbClient:
    """
    Return a process-wide DB client; its engine owns the connection pool.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    database_url = settings.resolved_database_url()
    if database_url is None:
        if not settings.use_in_memory_backends:
            logger.warning(
                "No DATABASE_URL or PGHOST configured; using an in-memory SQLite store"
            )
        _db_client = SqlDbClient(None)
    else:
        _db_client = SqlDbClient(database_url, pool_size=settings.db_pool_size)
    return _db_client


def reset_db_client() -> None:
    """Forget the cached client so the next request builds a fresh one."""
    global _db_client
    _db_client = None

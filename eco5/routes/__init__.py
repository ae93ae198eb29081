"""
HTTP routes for the Eco5 API, one module per resource family.
"""

from fastapi import APIRouter

from eco5.routes import (
    alerts,
    auth,
    dashboard,
    events,
    forum,
    health,
    impact_calculator,
    resources,
    users,
)

router = APIRouter()
router.include_router(health.router)
router.include_router(auth.router)
router.include_router(users.router)
router.include_router(dashboard.router)
router.include_router(impact_calculator.router)
router.include_router(forum.router)
router.include_router(events.router)
router.include_router(resources.router)
router.include_router(alerts.router)

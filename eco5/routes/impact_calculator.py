"""
Impact calculator inputs (travel, energy, waste) per user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from eco5.auth import get_current_user
from eco5.db import DbClient
from eco5.dependencies import get_db_client
from eco5.routes.common import require_found, require_update_fields, require_user
from eco5.schemas import ImpactCalculatorResponse, ImpactCalculatorUpdatePayload

router = APIRouter(
    prefix="/impact-calculator",
    tags=["impact-calculator"],
    dependencies=[Depends(get_current_user)],
)


@router.get("/{user_id}", response_model=ImpactCalculatorResponse)
def get_impact_calculator(user_id: str, db: DbClient = Depends(get_db_client)):
    """
    Return the user's calculator, creating an empty one on first read.
    """
    require_user(db, user_id)
    return db.get_or_create_impact_calculator(user_id).as_dict()


@router.patch("/{user_id}", response_model=ImpactCalculatorResponse)
def update_impact_calculator(
    user_id: str,
    payload: ImpactCalculatorUpdatePayload,
    db: DbClient = Depends(get_db_client),
):
    fields = require_update_fields(payload)
    calculator = require_found(
        db.update_impact_calculator(user_id, fields),
        "Impact calculator not found",
        "CALCULATOR_NOT_FOUND",
    )
    return calculator.as_dict()

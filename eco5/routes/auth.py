"""
Registration and login.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError

from eco5.auth import burn_password_check, hash_password, issue_token, verify_password
from eco5.config import Settings, get_settings
from eco5.db import DbClient
from eco5.dependencies import get_db_client
from eco5.errors import InvalidCredentials, MissingCredentials, UserAlreadyExists
from eco5.schemas import LoginPayload, LoginResponse, RegisterPayload, RegisterResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def normalize_email(email: str) -> str:
    return email.lower().strip()


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    payload: RegisterPayload,
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
):
    """
    Create an account with a zeroed dashboard and return it with a token.
    """
    email = normalize_email(payload.email)
    if db.get_user_by_email(email):
        raise UserAlreadyExists()

    try:
        password_hash = hash_password(payload.password, settings.bcrypt_rounds)
        user = db.create_user(email, payload.name, password_hash)
    except IntegrityError as exc:
        # Lost a race with a concurrent registration for the same email.
        raise UserAlreadyExists() from exc

    logger.info("Registered user %s", user.id)
    token = issue_token(user.id, user.email, settings)
    return RegisterResponse(**user.as_dict(), token=token)


@router.post("/login", response_model=LoginResponse)
def login(
    payload: Optional[LoginPayload] = None,
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
):
    if payload is None or not payload.email or not payload.password:
        raise MissingCredentials()

    user = db.get_user_by_email(normalize_email(payload.email))
    if user is None:
        burn_password_check(payload.password, settings.bcrypt_rounds)
        raise InvalidCredentials()
    if not verify_password(payload.password, user.password_hash):
        raise InvalidCredentials()

    token = issue_token(user.id, user.email, settings)
    return LoginResponse(auth_token=token, user_id=user.id)

"""
Credential hashing, signed bearer tokens and the request authentication guard.

A request moves through: no header -> token present -> signature and expiry
verified -> user resolved in the store. Each step can reject with its own
error code; only a resolved user reaches the route handler.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eco5.config import Settings, get_settings
from eco5.db import DbClient, UserRecord
from eco5.dependencies import get_db_client
from eco5.errors import AuthTokenInvalid, AuthTokenMissing, AuthUserNotFound

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    rounds = rounds or get_settings().bcrypt_rounds
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds)).decode(
        "utf-8"
    )


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


@lru_cache(maxsize=4)
def _dummy_hash(rounds: int) -> str:
    return hash_password("eco5-not-a-password", rounds)


def burn_password_check(password: str, rounds: int) -> None:
    """Spend one bcrypt comparison so unknown emails cost as much as bad passwords."""
    verify_password(password, _dummy_hash(rounds))


def issue_token(
    user_id: str, email: str, settings: Optional[Settings] = None
) -> str:
    settings = settings or get_settings()
    now = datetime.now(timezone.utc)
    payload = {
        "user_id": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expire_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: Optional[Settings] = None) -> dict:
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthTokenInvalid("Token has expired") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthTokenInvalid() from exc
    if not isinstance(payload.get("user_id"), str):
        raise AuthTokenInvalid()
    return payload


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: DbClient = Depends(get_db_client),
    settings: Settings = Depends(get_settings),
) -> UserRecord:
    """Resolve the bearer token to a stored user or reject the request."""
    if credentials is None or not credentials.credentials:
        raise AuthTokenMissing()

    payload = decode_token(credentials.credentials, settings)
    user = db.get_user(payload["user_id"])
    if user is None:
        logger.info("Token for unknown user %s rejected", payload["user_id"])
        raise AuthUserNotFound()
    return user

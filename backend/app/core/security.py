"""
Password hashing, JWT issuing and bearer-token authentication.

A token is accepted only when it decodes, carries a numeric `sub`, and a
Session row still holds it. Anything else is a 401 before any booking logic
runs.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.core.logging import bind_user, get_logger
from app.core.metrics import record_auth_failure
from app.db.session import get_db
from app.models.session import Session

logger = get_logger(__name__)
settings = get_settings()

bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    # jti keeps two tokens issued in the same second distinct
    to_encode.update({"exp": expire, "iat": datetime.now(timezone.utc), "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _unauthorized(reason: str) -> HTTPException:
    record_auth_failure(reason)
    logger.info("auth_rejected", reason=reason)
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_user_id(token: str) -> Optional[int]:
    """Return the user id carried by a valid token, or None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.PyJWTError:
        return None

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> int:
    if credentials is None:
        raise _unauthorized("missing")

    token = credentials.credentials
    user_id = decode_user_id(token)
    if user_id is None:
        raise _unauthorized("invalid")

    result = await db.execute(
        select(Session.id).where(Session.token == token, Session.user_id == user_id)
    )
    if result.scalar_one_or_none() is None:
        raise _unauthorized("no_session")

    bind_user(user_id)
    return user_id

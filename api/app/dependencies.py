# api/app/dependencies.py
from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

import jwt
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.app.config import Settings, get_settings
from db.session import get_db
from services.errors import AuthenticationError

logger = logging.getLogger(__name__)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_db():
        yield session


def decode_user_id(token: str, settings: Settings) -> str:
    """Verify an identity-provider token and return its subject."""
    try:
        claims = jwt.decode(
            token,
            settings.auth_jwt_secret,
            algorithms=[settings.auth_jwt_algorithm],
            options={"require": ["sub"]},
        )
    except jwt.PyJWTError as exc:
        raise AuthenticationError(f"Invalid token: {exc}") from exc

    subject = claims.get("sub")
    if not isinstance(subject, str) or not subject:
        raise AuthenticationError("Token has no subject")
    return subject


async def get_current_user_id(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """Authenticate the caller by bearer token; returns the opaque user id."""
    scheme, _, token = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    try:
        return decode_user_id(token.strip(), settings)
    except AuthenticationError as exc:
        logger.info("Rejected caller: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized") from exc

"""
Cookie-backed session store.

The whole session is the small payload below, signed and kept in one
HTTP-only cookie. Handlers read it through the `get_session` dependency and
persist changes with `save_session` / `clear_session` on the outgoing response.
"""

import logging
from typing import Optional

from fastapi import Request, Response
from pydantic import BaseModel, ConfigDict, Field

from app.core.config import settings
from app.core.security import JWTError, decode_session, encode_session

logger = logging.getLogger(__name__)

DEMO_USER_ID = "demo-user"


class SessionData(BaseModel):
    """Session payload: `{userId, isAdmin, isDemo, resetUserId}`."""
    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(default=None, alias="userId")
    is_admin: bool = Field(default=False, alias="isAdmin")
    is_demo: bool = Field(default=False, alias="isDemo")
    reset_user_id: Optional[str] = Field(default=None, alias="resetUserId")


def get_session(request: Request) -> SessionData:
    """
    Decode the session cookie of the current request.

    A missing, tampered or expired cookie yields an anonymous session.
    """
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return SessionData()

    try:
        return SessionData.model_validate(decode_session(token))
    except (JWTError, ValueError) as e:
        logger.debug(f"Ignoring invalid session cookie: {e}")
        return SessionData()


def save_session(response: Response, session: SessionData) -> None:
    """Write the session back as a signed cookie."""
    token = encode_session(session.model_dump(by_alias=True, exclude_none=True))
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def clear_session(response: Response) -> None:
    """Destroy the session by expiring the cookie."""
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )

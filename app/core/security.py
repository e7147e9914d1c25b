"""
Security utilities for password hashing and session signing.

Passwords are hashed with bcrypt. The session payload travels in a single
HTTP-only cookie as a signed JWT, so there is no server-side session table.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from app.core.config import settings

# Password hashing context (bcrypt)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hashed password."""
    if not plain_password or not hashed_password:
        return False
    # Bcrypt has a 72-byte limit - truncate if necessary
    password_bytes = plain_password.encode('utf-8')[:72]
    try:
        return pwd_context.verify(password_bytes, hashed_password)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


def get_password_hash(password: str) -> str:
    """
    Hash a password using bcrypt.

    Note: Bcrypt has a 72-byte limit. Passwords longer than 72 bytes
    are automatically truncated to comply with this limitation.
    """
    password_bytes = password.encode('utf-8')[:72]
    return pwd_context.hash(password_bytes)


def encode_session(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """
    Sign a session payload.

    Args:
        data: Session fields (userId, isAdmin, isDemo, resetUserId)
        expires_delta: Optional lifetime (default: SESSION_MAX_AGE_SECONDS)

    Returns:
        Signed token suitable for a cookie value
    """
    to_encode = data.copy()
    lifetime = expires_delta or timedelta(seconds=settings.SESSION_MAX_AGE_SECONDS)
    to_encode.update({"exp": datetime.now(timezone.utc) + lifetime})
    return jwt.encode(to_encode, settings.SESSION_SECRET, algorithm=settings.SESSION_ALGORITHM)


def decode_session(token: str) -> dict:
    """
    Verify and decode a session token.

    Raises:
        JWTError: If the token is tampered with or expired
    """
    payload = jwt.decode(token, settings.SESSION_SECRET, algorithms=[settings.SESSION_ALGORITHM])
    payload.pop("exp", None)
    return payload


__all__ = ["JWTError", "verify_password", "get_password_hash", "encode_session", "decode_session"]

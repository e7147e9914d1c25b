"""
Pydantic schemas for the admin auth flow.

Both verbs of /auth take an `action` discriminator plus the fields that
action needs; each handler checks its own fields. Credentials are accepted
as sent so that signup can refuse a second admin before looking at them.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from app.schemas.common import Payload


class AuthActionRequest(Payload):
    """POST /auth: signup, login, logout, request_password_reset."""
    action: Optional[str] = None
    username: Any = None
    password: Any = None
    email: Any = None
    is_demo: Any = None


class AuthUpdateRequest(Payload):
    """PUT /auth: update_credentials, reset_password."""
    action: Optional[str] = None
    current_password: Optional[str] = None
    new_username: Optional[str] = None
    new_password: Optional[str] = None


class UserInfo(BaseModel):
    """Display info returned to the admin panel (no credentials)."""
    username: str
    email: Optional[str] = None
    is_demo: bool = Field(default=False, serialization_alias="isDemo")

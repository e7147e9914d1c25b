"""
Admin authentication endpoints.

There is exactly one admin account. The session lives in a signed cookie
(see app.core.session); each action below reads it and writes it back on
the response.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import AuthError, DemoRestrictionError, ForbiddenError, NotFoundError, ValidationError
from app.core.security import verify_password
from app.core.session import DEMO_USER_ID, SessionData, clear_session, get_session, save_session
from app.crud import activity_log
from app.crud import settings as settings_crud
from app.crud import user as user_crud
from app.crud.user import users
from app.models.user import User
from app.schemas.user import AuthActionRequest, AuthUpdateRequest, UserInfo

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger(__name__)

DEMO_USER = UserInfo(username="Demo User", email="demo@example.com", is_demo=True)


def _user_info(user: User, is_demo: bool = False) -> dict:
    return UserInfo(username=user.username, email=user.email, is_demo=is_demo).model_dump(by_alias=True)


def _text(value) -> Optional[str]:
    """Non-empty string value of a credential field, else None."""
    return value if isinstance(value, str) and value else None


@router.get("/status")
def auth_status(db: Session = Depends(get_db), session: SessionData = Depends(get_session)):
    """
    Who is logged in.

    Returns `{isLoggedIn: true, user}` for a live admin session, else
    `{isLoggedIn: false, adminExists}` so the panel knows whether to offer
    signup.
    """
    if session.is_admin and session.user_id:
        if session.is_demo and session.user_id == DEMO_USER_ID:
            return {"isLoggedIn": True, "user": DEMO_USER.model_dump(by_alias=True)}

        user = users.get(db, session.user_id)
        if user is not None:
            return {"isLoggedIn": True, "user": _user_info(user, is_demo=session.is_demo)}

    return {"isLoggedIn": False, "adminExists": user_crud.admin_exists(db)}


@router.post("")
def auth_action(
    payload: AuthActionRequest,
    response: Response,
    db: Session = Depends(get_db),
    session: SessionData = Depends(get_session),
):
    """
    Dispatch on `action`: signup, login, logout, request_password_reset.
    """
    action = payload.action

    if action == "signup":
        return _signup(payload, response, db)
    if action == "login":
        return _login(payload, response, db)
    if action == "logout":
        activity_log.record(db, "Admin Logout", "User logged out.")
        clear_session(response)
        return {"message": "Logged out."}
    if action == "request_password_reset":
        email = _text(payload.email)
        user = user_crud.get_by_email(db, email) if email else None
        if user is None:
            raise NotFoundError("Email not found.")
        session.reset_user_id = user.id
        save_session(response, session)
        return {"message": "Proceed to reset."}

    raise ValidationError("Invalid action.")


def _signup(payload: AuthActionRequest, response: Response, db: Session) -> dict:
    """Create the single admin account."""
    if user_crud.admin_exists(db):
        raise ForbiddenError("Admin account already exists.")
    username, password = _text(payload.username), _text(payload.password)
    if not username:
        raise ValidationError("Validation Error: Missing required field: username")
    if not password:
        raise ValidationError("Validation Error: Missing required field: password")
    if payload.email is not None and not isinstance(payload.email, str):
        raise ValidationError("Validation Error: Invalid field: email")

    user = user_crud.create_admin(db, username, payload.email or None, password)
    logger.info(f"Admin account created: {user.username}")
    response.status_code = status.HTTP_201_CREATED
    return {"message": "Admin created."}


def _login(payload: AuthActionRequest, response: Response, db: Session) -> dict:
    if payload.is_demo:
        if not settings_crud.get_settings(db, "securitySettings").demo_mode_enabled:
            raise ForbiddenError("Demo mode is disabled.")
        save_session(response, SessionData(user_id=DEMO_USER_ID, is_admin=True, is_demo=True))
        activity_log.record(db, "Demo Login", "Demo user logged in.")
        return {"user": DEMO_USER.model_dump(by_alias=True)}

    username, password = _text(payload.username), _text(payload.password)
    user = user_crud.get_by_username(db, username) if username else None
    if user is None or password is None or not verify_password(password, user.password_hash):
        logger.warning("Failed admin login attempt")
        raise AuthError("Invalid credentials.")

    user_crud.mark_login(db, user)
    save_session(response, SessionData(user_id=user.id, is_admin=True, is_demo=False))
    activity_log.record(db, "Admin Login", f"User {user.username} logged in.")
    return {"user": _user_info(user)}


@router.put("")
def auth_update(
    payload: AuthUpdateRequest,
    response: Response,
    db: Session = Depends(get_db),
    session: SessionData = Depends(get_session),
):
    """
    Dispatch on `action`: update_credentials, reset_password.
    """
    if payload.action == "update_credentials":
        return _update_credentials(payload, db, session)

    if payload.action == "reset_password":
        if not session.reset_user_id:
            raise AuthError("Invalid reset request.")
        if not payload.new_password:
            raise ValidationError("Validation Error: Missing required field: newPassword")
        if not user_crud.set_password(db, session.reset_user_id, payload.new_password):
            raise AuthError("Invalid reset request.")
        clear_session(response)
        return {"message": "Password has been reset. Please log in again."}

    raise ValidationError("Invalid action.")


def _update_credentials(payload: AuthUpdateRequest, db: Session, session: SessionData) -> dict:
    if not session.is_admin or not session.user_id:
        raise AuthError()
    if session.is_demo:
        raise DemoRestrictionError()

    user = users.get(db, session.user_id)
    if user is None or not payload.current_password or not verify_password(payload.current_password, user.password_hash):
        raise AuthError("Incorrect current password.")
    if not payload.new_username or not payload.new_password:
        raise ValidationError("Validation Error: newUsername and newPassword are required.")

    user = user_crud.update_credentials(db, user, payload.new_username, payload.new_password)
    activity_log.record(db, "Credentials Updated", f"Admin credentials updated for {user.username}.")
    return {"user": _user_info(user)}

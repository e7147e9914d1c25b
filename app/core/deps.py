"""
FastAPI dependencies for authorization.

Routers attach `require_admin` at router level; the few public endpoints live
on routers without it, or check the session themselves.
"""

from fastapi import Depends

from app.core.exceptions import AuthError, DemoRestrictionError
from app.core.session import SessionData, get_session


def require_admin(session: SessionData = Depends(get_session)) -> SessionData:
    """
    Allow the request only for an admin session.

    The decision is never cached: every request re-reads the cookie.

    Raises:
        AuthError 401: No session, or a session without admin rights
    """
    if session.is_admin is not True:
        raise AuthError()
    return session


def reject_demo(session: SessionData = Depends(require_admin)) -> SessionData:
    """
    Admin-only, and additionally closed to the demo identity.

    Raises:
        AuthError 401: Not an admin
        DemoRestrictionError 403: Demo session
    """
    if session.is_demo:
        raise DemoRestrictionError()
    return session

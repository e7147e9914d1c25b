"""
Error taxonomy for the portal API.

Every error the API raises on purpose is a PortalError carrying its HTTP
status. The handlers registered in main.py turn them into `{"message": ...}`
responses; anything else becomes a generic 500.
"""

from fastapi import status


class PortalError(Exception):
    """Base class for errors whose message is safe to show the client."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(PortalError):
    """Missing or malformed request field."""
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(PortalError):
    """No session, or a session without admin rights."""
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ForbiddenError(PortalError):
    """Business rule refused the request (e.g. a second admin signup)."""
    status_code = status.HTTP_403_FORBIDDEN


class DemoRestrictionError(ForbiddenError):
    """Write attempted under the demo identity."""

    def __init__(self, message: str = "Action not allowed in demo mode."):
        super().__init__(message)


class NotFoundError(PortalError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(PortalError):
    """Duplicate value for a unique field."""
    status_code = status.HTTP_409_CONFLICT

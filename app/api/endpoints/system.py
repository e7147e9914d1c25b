"""
System endpoints: database status, settings, activity logs and the email
notification history. Admin-only.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.api.helpers import delete_one
from app.core.database import get_db, run_query
from app.core.deps import require_admin
from app.core.exceptions import ValidationError
from app.crud import activity_log
from app.crud import settings as settings_crud
from app.crud.resources import email_notifications
from app.schemas.common import DeleteRequest
from app.schemas.system import ActivityLogRecord, ActivityLogRequest, SettingsWriteRequest

router = APIRouter(prefix="/system", tags=["System"], dependencies=[Depends(require_admin)])
logger = logging.getLogger(__name__)


@router.get("/db-status")
def db_status(db: Session = Depends(get_db)):
    """
    Round-trip a trivial query.

    Failures are reported in the body with a 500 rather than through the
    generic error handler, so the admin panel can show the driver message.
    """
    try:
        run_query(db, "SELECT 1")
    except SQLAlchemyError as e:
        logger.error(f"Database status check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": str(getattr(e, "orig", None) or e)},
        )
    return {"status": "connected"}


@router.post("/settings")
def update_settings(payload: SettingsWriteRequest, db: Session = Depends(get_db)):
    """
    Upsert one settings object by key.

    Known categories are checked against their schema; other keys are
    stored as given.
    """
    if not payload.key or "value" not in payload.model_fields_set:
        raise ValidationError("Bad Request: key and value are required.")

    settings_crud.put_settings(db, payload.key, payload.value)
    logger.info(f"Settings '{payload.key}' updated")
    activity_log.record(db, "Settings Updated", f"{payload.key} settings updated.")
    return {"message": "Settings updated"}


@router.post("/activity-logs", status_code=status.HTTP_201_CREATED)
def create_activity_log(payload: ActivityLogRequest, db: Session = Depends(get_db)):
    """Client-initiated audit entry. This write is the primary one, so it is not best effort."""
    if not payload.action:
        raise ValidationError("Validation Error: Missing required field: action")
    entry = activity_log.activity_logs.create(db, action=payload.action, details=payload.details)
    return ActivityLogRecord.model_validate(entry).wire()


@router.delete("/activity-logs", status_code=status.HTTP_204_NO_CONTENT)
def clear_activity_logs(body: DeleteRequest, db: Session = Depends(get_db)):
    """`{clearAll: true}` wipes the log; anything else is a no-op."""
    if body.clear_all:
        count = activity_log.clear(db)
        logger.info(f"Cleared {count} activity log entries")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/email-notifications", status_code=status.HTTP_204_NO_CONTENT)
def delete_email_notifications(body: DeleteRequest, db: Session = Depends(get_db)):
    """Delete one notification record by `id`, or all with `clearAll`."""
    if body.clear_all:
        email_notifications.delete_all(db)
        activity_log.record(db, "Email Notifications Cleared", "All email notification records were cleared.")
    elif body.id:
        delete_one(db, email_notifications, body, "Email Notification", "Email Notification Deleted",
                   describe=lambda id: f"Email notification record with id {id} deleted.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

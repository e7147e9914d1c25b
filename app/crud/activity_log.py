"""
Audit trail writes.

`record` is the side effect every mutation ends with. It runs after the
primary write has committed and must never fail that write: errors are
rolled back, logged and dropped.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models.system import ActivityLog

logger = logging.getLogger(__name__)

activity_logs = CRUDBase(ActivityLog, order_by=(ActivityLog.timestamp.desc(),))


def record(db: Session, action: str, details: str) -> Optional[ActivityLog]:
    """
    Append one audit entry, best effort.

    Returns:
        The stored entry, or None if the write failed
    """
    try:
        return activity_logs.create(db, action=action, details=details)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to write activity log '{action}': {e}")
        return None


def clear(db: Session) -> int:
    """
    Remove every entry, then log the clearing itself.
    """
    count = activity_logs.delete_all(db)
    record(db, "Logs Cleared", "All activity logs were cleared.")
    return count

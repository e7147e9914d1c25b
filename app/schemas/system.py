from datetime import datetime
from typing import Any, Optional

from app.schemas.common import Payload, Record


class SettingsWriteRequest(Payload):
    """Upsert one named settings object."""
    key: Optional[str] = None
    value: Any = None


class ActivityLogRequest(Payload):
    action: Optional[str] = None
    details: Optional[str] = None


class ActivityLogRecord(Record):
    id: str
    action: str
    details: Optional[str] = None
    timestamp: datetime

"""
Column helpers shared by every portal model.
"""

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """Opaque row id, generated application-side at creation."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)

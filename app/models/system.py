from sqlalchemy import Column, DateTime, String, Text
from app.core.database import Base
from app.models.base import new_id, utcnow


class ActivityLog(Base):
    """
    Append-only audit trail of admin actions.

    Rows are only ever inserted, listed, or cleared in bulk.
    """
    __tablename__ = "activity_logs"

    id = Column(String(36), primary_key=True, default=new_id)
    action = Column(String, nullable=False)
    details = Column(Text, nullable=True)
    timestamp = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)


class KeyValueStore(Base):
    """
    Settings bag: one row per named settings object, value is JSON text.
    """
    __tablename__ = "key_value_store"

    key_name = Column(String(100), primary_key=True)
    value = Column(Text, nullable=True)

    def __repr__(self):
        return f"<KeyValueStore(key_name='{self.key_name}')>"

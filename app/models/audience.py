"""
Audience records: newsletter subscribers and contact form submissions.
"""

from sqlalchemy import Column, DateTime, String, Text
from app.core.database import Base
from app.models.base import new_id, utcnow


class Subscriber(Base):
    __tablename__ = "subscribers"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String, unique=True, nullable=False, index=True)
    status = Column(String(20), nullable=False, default="active")
    subscription_date = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class ContactSubmission(Base):
    __tablename__ = "contact_submissions"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    subject = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

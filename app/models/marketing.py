"""
Marketing models: sponsored ads and the outbound email records.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text
from app.core.database import Base
from app.models.base import new_id, utcnow


class SponsoredAd(Base):
    """
    Image ad placed on the public site.

    `clicks` only ever grows, through the public click-tracking endpoint.
    """
    __tablename__ = "sponsored_ads"

    id = Column(String(36), primary_key=True, default=new_id)
    image_url = Column(String, nullable=False)
    destination_url = Column(String, nullable=False)
    placement = Column(String, nullable=False, default="sidebar-top")
    status = Column(String(20), nullable=False, default="active")
    clicks = Column(Integer, nullable=False, default=0)


class EmailNotification(Base):
    """One delivered email (job alert, campaign copy, ...)."""
    __tablename__ = "email_notifications"

    id = Column(String(36), primary_key=True, default=new_id)
    recipient = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    body = Column(Text, nullable=True)
    sent_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class CustomEmail(Base):
    """Campaign email written by the admin and sent to subscribers."""
    __tablename__ = "custom_emails"

    id = Column(String(36), primary_key=True, default=new_id)
    subject = Column(String, nullable=False)
    body = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)


class EmailTemplate(Base):
    __tablename__ = "email_templates"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False, index=True)
    subject = Column(String, nullable=False)
    body = Column(Text, nullable=True)

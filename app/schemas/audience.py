from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from app.schemas.common import Payload, Record, first_missing


class SubscribeRequest(Payload):
    """Public newsletter signup."""
    email: Optional[EmailStr] = None


class ContactPayload(Payload):
    """Public contact form submission."""
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    subject: Optional[str] = None
    message: Optional[str] = None


def validate_contact(contact: ContactPayload) -> Optional[str]:
    return first_missing(contact.wire(), ("name", "email", "message"))


class SubscriberRecord(Record):
    id: str
    email: str
    status: str
    subscription_date: datetime


class ContactRecord(Record):
    id: str
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    submitted_at: datetime

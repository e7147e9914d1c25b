from datetime import datetime
from typing import Optional

from app.schemas.common import Payload, Record, first_missing


class SponsoredAdPayload(Payload):
    """
    Sponsored ad body.

    With `trackClick: true` only `id` is read and the click counter is bumped.
    `clicks` is never accepted from the client.
    """
    id: Optional[str] = None
    image_url: Optional[str] = None
    destination_url: Optional[str] = None
    placement: Optional[str] = None
    status: Optional[str] = None
    track_click: Optional[bool] = None


def validate_ad(ad: SponsoredAdPayload) -> Optional[str]:
    return first_missing(ad.wire(), ("imageUrl", "destinationUrl"))


class SponsoredAdRecord(Record):
    id: str
    image_url: str
    destination_url: str
    placement: str
    status: str
    clicks: int = 0


class CustomEmailRequest(Payload):
    subject: Optional[str] = None
    body: Optional[str] = None


def validate_custom_email(email: CustomEmailRequest) -> Optional[str]:
    return first_missing(email.wire(), ("subject", "body"))


class CustomEmailRecord(Record):
    id: str
    subject: str
    body: str
    sent_at: datetime


class EmailTemplatePayload(Payload):
    id: Optional[str] = None
    name: Optional[str] = None
    subject: Optional[str] = None
    body: Optional[str] = None


def validate_template(template: EmailTemplatePayload) -> Optional[str]:
    return first_missing(template.wire(), ("name", "subject"))


class EmailTemplateRecord(Record):
    id: str
    name: str
    subject: str
    body: Optional[str] = None


class EmailNotificationRecord(Record):
    id: str
    recipient: str
    subject: str
    body: Optional[str] = None
    sent_at: datetime

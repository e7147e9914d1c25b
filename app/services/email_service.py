"""
AWS SES Email Service for newsletter campaigns.

Handles message formatting, delivery to subscribers, and recording of what
was sent. Delivery is off unless EMAIL_DELIVERY_ENABLED is set; a campaign is
still stored either way.
"""

import logging
from html import escape
from typing import List

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.crud import activity_log
from app.crud.resources import active_subscribers, custom_emails, email_notifications
from app.models.marketing import CustomEmail

logger = logging.getLogger(__name__)


class EmailService:
    """
    Service for sending emails via AWS SES.

    The boto3 client is created on first send, so importing this module
    never needs AWS configuration.
    """

    def __init__(self):
        self._ses_client = None

    @property
    def ses_client(self):
        if self._ses_client is None:
            session_kwargs = {
                'region_name': settings.AWS_REGION,
            }

            # Add credentials if provided (otherwise uses IAM role)
            if settings.AWS_ACCESS_KEY_ID and settings.AWS_SECRET_ACCESS_KEY:
                session_kwargs['aws_access_key_id'] = settings.AWS_ACCESS_KEY_ID
                session_kwargs['aws_secret_access_key'] = settings.AWS_SECRET_ACCESS_KEY

            self._ses_client = boto3.client('ses', **session_kwargs)
        return self._ses_client

    def send_email(self, recipient: str, subject: str, body: str) -> bool:
        """
        Send one email.

        Args:
            recipient: Recipient email address
            subject: Subject line
            body: Plain text body; an HTML part is derived from it

        Returns:
            bool: True if email sent successfully, False otherwise
        """
        try:
            response = self.ses_client.send_email(
                Source=f"{settings.AWS_SES_FROM_NAME} <{settings.AWS_SES_FROM_EMAIL}>",
                Destination={'ToAddresses': [recipient]},
                Message={
                    'Subject': {'Data': subject, 'Charset': 'UTF-8'},
                    'Body': {
                        'Html': {'Data': self._build_html(subject, body), 'Charset': 'UTF-8'},
                        'Text': {'Data': body, 'Charset': 'UTF-8'}
                    }
                }
            )

            message_id = response.get('MessageId')
            logger.info(f"Email sent to {recipient} (MessageId: {message_id})")
            return True

        except ClientError as e:
            error_code = e.response['Error']['Code']
            error_message = e.response['Error']['Message']
            logger.error(f"AWS SES ClientError: {error_code} - {error_message}")
            return False

        except BotoCoreError as e:
            logger.error(f"AWS BotoCoreError: {str(e)}")
            return False

    def _build_html(self, subject: str, body: str) -> str:
        paragraphs = "".join(
            f"<p>{escape(line)}</p>" for line in body.split("\n") if line.strip()
        )
        return f"""<!DOCTYPE html>
<html>
<head><meta charset="UTF-8"><title>{escape(subject)}</title></head>
<body style="font-family: Arial, sans-serif;">
{paragraphs}
<hr>
<p style="color: #888888; font-size: 12px;">{escape(settings.AWS_SES_FROM_NAME)}</p>
</body>
</html>
"""


def send_campaign(db: Session, subject: str, body: str, service: "EmailService" = None) -> CustomEmail:
    """
    Store a custom email and, when delivery is enabled, send it to every
    active subscriber.

    Each successful delivery is recorded as an EmailNotification. Failed
    deliveries are logged and skipped.

    Returns:
        The stored CustomEmail
    """
    campaign = custom_emails.create(db, subject=subject, body=body)

    delivered: List[str] = []
    if settings.EMAIL_DELIVERY_ENABLED:
        service = service or email_service
        for subscriber in active_subscribers(db):
            if service.send_email(subscriber.email, subject, body):
                email_notifications.create(db, recipient=subscriber.email, subject=subject, body=body)
                delivered.append(subscriber.email)
        logger.info(f"Campaign {campaign.id} delivered to {len(delivered)} subscribers")
    else:
        logger.info(f"Campaign {campaign.id} stored; email delivery is disabled")

    activity_log.record(db, "Email Campaign Sent", f"Campaign sent: {subject}")
    return campaign


# Singleton instance
email_service = EmailService()

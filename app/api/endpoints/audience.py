"""
Newsletter subscribers and contact form submissions.

Signing up and submitting the contact form are public; reading and
deleting are admin-only.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.api.helpers import check, delete_one
from app.core.database import get_db
from app.core.deps import require_admin
from app.core.exceptions import ConflictError
from app.crud import activity_log
from app.crud.resources import contacts, subscriber_by_email, subscribers
from app.schemas.audience import (
    ContactPayload,
    ContactRecord,
    SubscribeRequest,
    SubscriberRecord,
    validate_contact,
)
from app.schemas.common import DeleteRequest

router = APIRouter(prefix="/audience", tags=["Audience"])
logger = logging.getLogger(__name__)

ALREADY_SUBSCRIBED = "This email is already subscribed."


@router.post("/subscribers", status_code=status.HTTP_201_CREATED)
def subscribe(payload: SubscribeRequest, db: Session = Depends(get_db)):
    """
    Public newsletter signup.

    Emails are compared case-insensitively and stored lowercased.

    Raises:
        ValidationError 400: Missing or malformed email
        ConflictError 409: Email already subscribed
    """
    check("Missing required field: email" if not payload.email else None)
    email = payload.email.lower()

    if subscriber_by_email(db, email) is not None:
        raise ConflictError(ALREADY_SUBSCRIBED)

    try:
        subscriber = subscribers.create(db, email=email)
    except IntegrityError:
        # Lost a race with a concurrent signup for the same address
        db.rollback()
        raise ConflictError(ALREADY_SUBSCRIBED)

    logger.info(f"New subscriber {subscriber.id}")
    activity_log.record(db, "New Subscriber", f"New subscriber: {email}")
    return SubscriberRecord.model_validate(subscriber).wire()


@router.delete("/subscribers", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_subscriber(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, subscribers, body, "Subscriber", "Subscriber Deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/contacts", status_code=status.HTTP_201_CREATED)
def submit_contact(payload: ContactPayload, db: Session = Depends(get_db)):
    """Public contact form. Not audited; the submission itself is the record."""
    check(validate_contact(payload))
    submission = contacts.create(
        db,
        name=payload.name,
        email=payload.email,
        subject=payload.subject,
        message=payload.message,
    )
    logger.info(f"Contact submission {submission.id} received")
    return ContactRecord.model_validate(submission).wire()


@router.delete("/contacts", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_contact(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, contacts, body, "Contact Submission", "Contact Deleted",
               describe=lambda id: f"Contact message with id {id} deleted.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

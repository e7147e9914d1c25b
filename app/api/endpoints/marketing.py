"""
Sponsored ads, email campaigns and email templates.

Ad click tracking is the one public write here; campaign sending and
template changes are closed to the demo identity.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.helpers import check, delete_one, not_found, require_update_id
from app.core.database import get_db
from app.core.deps import reject_demo, require_admin
from app.core.exceptions import AuthError, ValidationError
from app.core.session import SessionData, get_session
from app.crud import activity_log
from app.crud.resources import custom_emails, email_templates, sponsored_ads, track_click
from app.schemas.common import DeleteRequest
from app.schemas.marketing import (
    CustomEmailRecord,
    CustomEmailRequest,
    EmailTemplatePayload,
    EmailTemplateRecord,
    SponsoredAdPayload,
    SponsoredAdRecord,
    validate_ad,
    validate_custom_email,
    validate_template,
)
from app.services.email_service import send_campaign

router = APIRouter(prefix="/marketing", tags=["Marketing"])
logger = logging.getLogger(__name__)


def _ad_columns(payload: SponsoredAdPayload) -> dict:
    columns = {"image_url": payload.image_url, "destination_url": payload.destination_url}
    if payload.placement:
        columns["placement"] = payload.placement
    if payload.status:
        columns["status"] = payload.status
    return columns


# --- Sponsored ads ---

@router.post("/sponsored-ads", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_sponsored_ad(payload: SponsoredAdPayload, db: Session = Depends(get_db)):
    check(validate_ad(payload))
    ad = sponsored_ads.create(db, clicks=0, **_ad_columns(payload))
    activity_log.record(db, "Sponsored Ad Added", f"Ad added for {ad.destination_url}")
    return SponsoredAdRecord.model_validate(ad).wire()


@router.put("/sponsored-ads")
def update_sponsored_ad(
    payload: SponsoredAdPayload,
    db: Session = Depends(get_db),
    session: SessionData = Depends(get_session),
):
    """
    Two operations on one verb.

    - `{id, trackClick: true}`: public; bumps the click counter.
    - anything else: admin-only update; `clicks` is left untouched and the
      row is returned as stored.
    """
    if payload.track_click:
        if not payload.id:
            raise ValidationError("Ad ID is required for click tracking.")
        if not track_click(db, payload.id):
            raise not_found("Ad", payload.id)
        return {"message": "Click tracked"}

    if session.is_admin is not True:
        raise AuthError()

    ad_id = require_update_id(payload.id, "Ad")
    check(validate_ad(payload))

    ad = sponsored_ads.update(db, ad_id, **_ad_columns(payload))
    if ad is None:
        raise not_found("Ad", ad_id)

    activity_log.record(db, "Sponsored Ad Updated", f"Ad updated for {ad.destination_url}")
    return SponsoredAdRecord.model_validate(ad).wire()


@router.delete("/sponsored-ads", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_sponsored_ad(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, sponsored_ads, body, "Ad", "Sponsored Ad Deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Custom emails ---

@router.post("/custom-emails", status_code=status.HTTP_201_CREATED, dependencies=[Depends(reject_demo)])
def send_custom_email(payload: CustomEmailRequest, db: Session = Depends(get_db)):
    """Store a campaign and deliver it to active subscribers when enabled."""
    check(validate_custom_email(payload))
    campaign = send_campaign(db, payload.subject, payload.body)
    return CustomEmailRecord.model_validate(campaign).wire()


@router.delete("/custom-emails", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_admin)])
def delete_custom_email(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, custom_emails, body, "Custom Email", action=None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Email templates ---

def _template_columns(payload: EmailTemplatePayload) -> dict:
    return {"name": payload.name, "subject": payload.subject, "body": payload.body}


@router.post("/email-templates", status_code=status.HTTP_201_CREATED, dependencies=[Depends(reject_demo)])
def create_email_template(payload: EmailTemplatePayload, db: Session = Depends(get_db)):
    check(validate_template(payload))
    template = email_templates.create(db, **_template_columns(payload))
    activity_log.record(db, "Email Template Created", f"Template created: {template.name}")
    return EmailTemplateRecord.model_validate(template).wire()


@router.put("/email-templates", dependencies=[Depends(reject_demo)])
def update_email_template(payload: EmailTemplatePayload, db: Session = Depends(get_db)):
    template_id = require_update_id(payload.id, "Email Template")
    check(validate_template(payload))

    template = email_templates.update(db, template_id, **_template_columns(payload))
    if template is None:
        raise not_found("Email Template", template_id)

    activity_log.record(db, "Email Template Updated", f"Template updated: {template.name}")
    return EmailTemplateRecord.model_validate(template).wire()


@router.delete("/email-templates", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(reject_demo)])
def delete_email_template(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, email_templates, body, "Email Template", "Email Template Deleted",
               describe=lambda id: f"Template with id {id} deleted.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Builds the single payload behind GET /api/data.

The public site and the admin panel both render from this one object:
every collection, then settings merged over the top level. Admin-only
collections are always present and empty for anonymous callers.
"""

import logging
from typing import Any, Dict, List, Type

from sqlalchemy.orm import Session

from app.crud import job as job_crud
from app.crud import resources
from app.crud import settings as settings_crud
from app.crud.activity_log import activity_logs
from app.crud.base import CRUDBase
from app.schemas.common import Record
from app.schemas.audience import ContactRecord, SubscriberRecord
from app.schemas.content import BreakingNewsRecord, PostRecord, QuickLinkRecord, UpcomingExamRecord
from app.schemas.job import JobRecord
from app.schemas.marketing import (
    CustomEmailRecord,
    EmailNotificationRecord,
    EmailTemplateRecord,
    SponsoredAdRecord,
)
from app.schemas.preparation import BookRecord, CourseRecord
from app.schemas.system import ActivityLogRecord

logger = logging.getLogger(__name__)

PUBLIC_COLLECTIONS = {
    "jobs": (job_crud.jobs, JobRecord),
    "quickLinks": (resources.quick_links, QuickLinkRecord),
    "posts": (resources.posts, PostRecord),
    "breakingNews": (resources.breaking_news, BreakingNewsRecord),
    "sponsoredAds": (resources.sponsored_ads, SponsoredAdRecord),
    "preparationCourses": (resources.courses, CourseRecord),
    "preparationBooks": (resources.books, BookRecord),
    "upcomingExams": (resources.upcoming_exams, UpcomingExamRecord),
}

ADMIN_COLLECTIONS = {
    "subscribers": (resources.subscribers, SubscriberRecord),
    "activityLogs": (activity_logs, ActivityLogRecord),
    "contacts": (resources.contacts, ContactRecord),
    "emailNotifications": (resources.email_notifications, EmailNotificationRecord),
    "customEmails": (resources.custom_emails, CustomEmailRecord),
    "emailTemplates": (resources.email_templates, EmailTemplateRecord),
}


def _load(db: Session, repo: CRUDBase, record: Type[Record]) -> List[Dict[str, Any]]:
    return [record.model_validate(row).wire() for row in repo.list(db)]


def build_site_data(db: Session, is_admin: bool) -> Dict[str, Any]:
    """
    Args:
        db: Database session
        is_admin: Whether the caller holds an admin session

    Returns:
        Settings and collections keyed by their camelCase names
    """
    data: Dict[str, Any] = {}

    for key, (repo, record) in PUBLIC_COLLECTIONS.items():
        data[key] = _load(db, repo, record)

    for key, (repo, record) in ADMIN_COLLECTIONS.items():
        data[key] = _load(db, repo, record) if is_admin else []

    # Stored settings win over a collection of the same name
    data.update(settings_crud.merged_settings(db))
    return data

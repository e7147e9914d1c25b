"""
Database models package.
"""

from app.models.job import Job, JobStatus
from app.models.content import (
    ContentPost,
    PostStatus,
    PostType,
    BreakingNews,
    QuickLink,
    UpcomingExam,
    VisibilityStatus,
)
from app.models.preparation import PreparationBook, PreparationCourse
from app.models.audience import Subscriber, ContactSubmission
from app.models.marketing import SponsoredAd, EmailNotification, CustomEmail, EmailTemplate
from app.models.system import ActivityLog, KeyValueStore
from app.models.user import User

__all__ = [
    "Job", "JobStatus",
    "ContentPost", "PostStatus", "PostType", "BreakingNews", "QuickLink", "UpcomingExam", "VisibilityStatus",
    "PreparationBook", "PreparationCourse",
    "Subscriber", "ContactSubmission",
    "SponsoredAd", "EmailNotification", "CustomEmail", "EmailTemplate",
    "ActivityLog", "KeyValueStore",
    "User",
]

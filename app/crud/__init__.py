"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from app.crud import activity_log, job, settings, user
from app.crud.resources import (
    breaking_news,
    contacts,
    courses,
    books,
    custom_emails,
    email_notifications,
    email_templates,
    posts,
    quick_links,
    sponsored_ads,
    subscribers,
    upcoming_exams,
)

__all__ = [
    "activity_log", "job", "settings", "user",
    "breaking_news", "contacts", "courses", "books", "custom_emails",
    "email_notifications", "email_templates", "posts", "quick_links",
    "sponsored_ads", "subscribers", "upcoming_exams",
]

"""
Schemas for posts, breaking news, quick links and upcoming exams.
"""

from datetime import date, datetime
from typing import Optional

from app.models.content import PostStatus, PostType, VisibilityStatus
from app.schemas.common import Payload, Record, first_invalid_choice, first_missing, parse_date

POST_REQUIRED_FIELDS = ("title", "category", "status", "type", "publishedDate")
VISIBILITY_CHOICES = [s.value for s in VisibilityStatus]


class PostPayload(Payload):
    id: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    content: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    published_date: Optional[str] = None
    exam_date: Optional[str] = None
    details_url: Optional[str] = None
    image_url: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None


def validate_post(post: PostPayload) -> Optional[str]:
    missing = first_missing(post.wire(), POST_REQUIRED_FIELDS)
    if missing:
        return missing
    if post.type not in [t.value for t in PostType]:
        return f"Invalid post type: {post.type}"
    if post.status not in [s.value for s in PostStatus]:
        return f"Invalid post status: {post.status}"
    if parse_date(post.published_date) is None:
        return "Invalid date format for publishedDate. Use YYYY-MM-DD."
    if post.exam_date and parse_date(post.exam_date) is None:
        return "Invalid date format for examDate. Use YYYY-MM-DD."
    return None


class PostRecord(Record):
    id: str
    title: str
    category: str
    content: Optional[str] = None
    status: str
    type: str
    published_date: date
    created_at: datetime
    exam_date: Optional[date] = None
    details_url: Optional[str] = None
    image_url: Optional[str] = None
    seo_title: Optional[str] = None
    seo_description: Optional[str] = None


class BreakingNewsPayload(Payload):
    id: Optional[str] = None
    text: Optional[str] = None
    link: Optional[str] = None
    status: Optional[str] = None


def validate_news(news: BreakingNewsPayload) -> Optional[str]:
    data = news.wire()
    return first_missing(data, ("text",)) or first_invalid_choice(data, "status", VISIBILITY_CHOICES)


class BreakingNewsRecord(Record):
    id: str
    text: str
    link: Optional[str] = None
    status: str


class QuickLinkPayload(Payload):
    id: Optional[str] = None
    title: Optional[str] = None
    category: Optional[str] = None
    url: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None


def validate_link(link: QuickLinkPayload) -> Optional[str]:
    data = link.wire()
    return first_missing(data, ("title", "url")) or first_invalid_choice(data, "status", VISIBILITY_CHOICES)


class QuickLinkRecord(Record):
    id: str
    title: str
    category: Optional[str] = None
    url: str
    description: Optional[str] = None
    status: str


class UpcomingExamPayload(Payload):
    id: Optional[str] = None
    name: Optional[str] = None
    deadline: Optional[str] = None
    notification_link: Optional[str] = None


def validate_exam(exam: UpcomingExamPayload) -> Optional[str]:
    if not exam.name:
        return "Missing required field: name"
    if parse_date(exam.deadline) is None:
        return "Invalid or missing field: deadline"
    if not exam.notification_link:
        return "Missing required field: notificationLink"
    return None


class UpcomingExamRecord(Record):
    id: str
    name: str
    deadline: date
    notification_link: str

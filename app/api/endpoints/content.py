"""
Editorial content endpoints: posts, breaking news, quick links and
upcoming exams. Mounted together under /content with the jobs router.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.helpers import check, delete_one, delete_one_or_many, not_found, require_update_id
from app.core.database import get_db
from app.crud import activity_log
from app.crud.resources import breaking_news, posts, quick_links, upcoming_exams
from app.schemas.common import DeleteRequest, parse_date
from app.schemas.content import (
    BreakingNewsPayload,
    BreakingNewsRecord,
    PostPayload,
    PostRecord,
    QuickLinkPayload,
    QuickLinkRecord,
    UpcomingExamPayload,
    UpcomingExamRecord,
    validate_exam,
    validate_link,
    validate_news,
    validate_post,
)

router = APIRouter(tags=["Content"])
logger = logging.getLogger(__name__)


def _post_columns(payload: PostPayload) -> dict:
    return {
        "title": payload.title,
        "category": payload.category,
        "content": payload.content,
        "status": payload.status,
        "type": payload.type,
        "published_date": parse_date(payload.published_date),
        "exam_date": parse_date(payload.exam_date),
        "details_url": payload.details_url,
        "image_url": payload.image_url,
        "seo_title": payload.seo_title,
        "seo_description": payload.seo_description,
    }


# --- Posts ---

@router.post("/posts", status_code=status.HTTP_201_CREATED)
def create_post(payload: PostPayload, db: Session = Depends(get_db)):
    check(validate_post(payload))
    post = posts.create(db, **_post_columns(payload))
    activity_log.record(db, "Post Created", f"New post: {post.title}")
    return PostRecord.model_validate(post).wire()


@router.put("/posts")
def update_post(payload: PostPayload, db: Session = Depends(get_db)):
    post_id = require_update_id(payload.id, "Post")
    check(validate_post(payload))

    post = posts.update(db, post_id, **_post_columns(payload))
    if post is None:
        raise not_found("Post", post_id)

    activity_log.record(db, "Post Updated", f"Post updated: {post.title}")
    return PostRecord.model_validate(post).wire()


@router.delete("/posts", status_code=status.HTTP_204_NO_CONTENT)
def delete_posts(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one_or_many(
        db, posts, body,
        entity="Post", action="Post Deleted", bulk_action="Bulk Post Deletion", noun="posts",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Breaking news ---

@router.post("/breaking-news", status_code=status.HTTP_201_CREATED)
def create_breaking_news(payload: BreakingNewsPayload, db: Session = Depends(get_db)):
    check(validate_news(payload))
    item = breaking_news.create(db, text=payload.text, link=payload.link, status=payload.status)
    activity_log.record(db, "Breaking News Added", f"News added: {item.text}")
    return BreakingNewsRecord.model_validate(item).wire()


@router.put("/breaking-news")
def update_breaking_news(payload: BreakingNewsPayload, db: Session = Depends(get_db)):
    news_id = require_update_id(payload.id, "Breaking News")
    check(validate_news(payload))

    item = breaking_news.update(db, news_id, text=payload.text, link=payload.link, status=payload.status)
    if item is None:
        raise not_found("Breaking News", news_id)

    activity_log.record(db, "Breaking News Updated", f"News updated: {item.text}")
    return BreakingNewsRecord.model_validate(item).wire()


@router.delete("/breaking-news", status_code=status.HTTP_204_NO_CONTENT)
def delete_breaking_news(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, breaking_news, body, "Breaking News", "Breaking News Deleted",
               describe=lambda id: f"News item with id {id} deleted.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Quick links ---

def _link_columns(payload: QuickLinkPayload) -> dict:
    return {
        "title": payload.title,
        "category": payload.category,
        "url": payload.url,
        "description": payload.description,
        "status": payload.status,
    }


@router.post("/quick-links", status_code=status.HTTP_201_CREATED)
def create_quick_link(payload: QuickLinkPayload, db: Session = Depends(get_db)):
    check(validate_link(payload))
    link = quick_links.create(db, **_link_columns(payload))
    activity_log.record(db, "Quick Link Created", f"Link added: {link.title}")
    return QuickLinkRecord.model_validate(link).wire()


@router.put("/quick-links")
def update_quick_link(payload: QuickLinkPayload, db: Session = Depends(get_db)):
    link_id = require_update_id(payload.id, "Quick Link")
    check(validate_link(payload))

    link = quick_links.update(db, link_id, **_link_columns(payload))
    if link is None:
        raise not_found("Quick Link", link_id)

    activity_log.record(db, "Quick Link Updated", f"Link updated: {link.title}")
    return QuickLinkRecord.model_validate(link).wire()


@router.delete("/quick-links", status_code=status.HTTP_204_NO_CONTENT)
def delete_quick_link(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, quick_links, body, "Quick Link", "Quick Link Deleted",
               describe=lambda id: f"Link with id {id} deleted.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# --- Upcoming exams ---

@router.post("/upcoming-exams", status_code=status.HTTP_201_CREATED)
def create_upcoming_exam(payload: UpcomingExamPayload, db: Session = Depends(get_db)):
    check(validate_exam(payload))
    exam = upcoming_exams.create(
        db,
        name=payload.name,
        deadline=parse_date(payload.deadline),
        notification_link=payload.notification_link,
    )
    activity_log.record(db, "Upcoming Exam Added", f"Exam added: {exam.name}")
    return UpcomingExamRecord.model_validate(exam).wire()


@router.put("/upcoming-exams")
def update_upcoming_exam(payload: UpcomingExamPayload, db: Session = Depends(get_db)):
    exam_id = require_update_id(payload.id, "Upcoming Exam")
    check(validate_exam(payload))

    exam = upcoming_exams.update(
        db, exam_id,
        name=payload.name,
        deadline=parse_date(payload.deadline),
        notification_link=payload.notification_link,
    )
    if exam is None:
        raise not_found("Upcoming Exam", exam_id)

    activity_log.record(db, "Upcoming Exam Updated", f"Exam updated: {exam.name}")
    return UpcomingExamRecord.model_validate(exam).wire()


@router.delete("/upcoming-exams", status_code=status.HTTP_204_NO_CONTENT)
def delete_upcoming_exam(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, upcoming_exams, body, "Upcoming Exam", "Upcoming Exam Deleted",
               describe=lambda id: f"Exam with id {id} deleted.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

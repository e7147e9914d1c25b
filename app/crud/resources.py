"""
Repositories for the resources that need nothing beyond CRUDBase,
each with the ordering the site lists them in.
"""

from sqlalchemy.orm import Session

from app.crud.base import CRUDBase
from app.models import (
    BreakingNews,
    ContactSubmission,
    ContentPost,
    CustomEmail,
    EmailNotification,
    EmailTemplate,
    PreparationBook,
    PreparationCourse,
    QuickLink,
    SponsoredAd,
    Subscriber,
    UpcomingExam,
)

posts = CRUDBase(ContentPost, order_by=(ContentPost.created_at.desc(),))
breaking_news = CRUDBase(BreakingNews)
quick_links = CRUDBase(QuickLink, order_by=(QuickLink.title.asc(),))
upcoming_exams = CRUDBase(UpcomingExam, order_by=(UpcomingExam.deadline.asc(),))
books = CRUDBase(PreparationBook, order_by=(PreparationBook.title.asc(),))
courses = CRUDBase(PreparationCourse, order_by=(PreparationCourse.title.asc(),))
sponsored_ads = CRUDBase(SponsoredAd)
subscribers = CRUDBase(Subscriber, order_by=(Subscriber.subscription_date.desc(),))
contacts = CRUDBase(ContactSubmission, order_by=(ContactSubmission.submitted_at.desc(),))
email_notifications = CRUDBase(EmailNotification, order_by=(EmailNotification.sent_at.desc(),))
custom_emails = CRUDBase(CustomEmail, order_by=(CustomEmail.sent_at.desc(),))
email_templates = CRUDBase(EmailTemplate, order_by=(EmailTemplate.name.asc(),))


def track_click(db: Session, ad_id: str) -> bool:
    """
    Bump an ad's click counter in a single UPDATE.

    Returns:
        False if no ad has this id
    """
    updated = (
        db.query(SponsoredAd)
        .filter(SponsoredAd.id == ad_id)
        .update({SponsoredAd.clicks: SponsoredAd.clicks + 1}, synchronize_session=False)
    )
    db.commit()
    return updated > 0


def subscriber_by_email(db: Session, email: str):
    return db.query(Subscriber).filter(Subscriber.email == email).first()


def active_subscribers(db: Session):
    return db.query(Subscriber).filter(Subscriber.status == "active").all()


def published_blog_posts(db: Session):
    """Published posts of type `posts`, the ones with a public blog URL."""
    return (
        db.query(ContentPost)
        .filter(ContentPost.status == "published", ContentPost.type == "posts")
        .all()
    )

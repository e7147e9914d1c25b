"""
Editorial content shown on the public site: posts, breaking news ticker,
quick links and the upcoming exam calendar.
"""

import enum
from sqlalchemy import Column, Date, DateTime, String, Text
from app.core.database import Base
from app.models.base import new_id, utcnow


class PostStatus(str, enum.Enum):
    PUBLISHED = "published"
    DRAFT = "draft"


class PostType(str, enum.Enum):
    POSTS = "posts"
    EXAM_NOTICES = "exam-notices"
    RESULTS = "results"


class VisibilityStatus(str, enum.Enum):
    """Toggle used by breaking news items and quick links."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class ContentPost(Base):
    """Blog post, exam notice or result announcement."""
    __tablename__ = "content_posts"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False)
    category = Column(String, nullable=False)
    content = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, index=True)
    type = Column(String(20), nullable=False, index=True)
    published_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    exam_date = Column(Date, nullable=True)
    details_url = Column(String, nullable=True)
    image_url = Column(String, nullable=True)
    seo_title = Column(String, nullable=True)
    seo_description = Column(Text, nullable=True)

    def __repr__(self):
        return f"<ContentPost(id={self.id}, type={self.type}, title='{self.title}')>"


class BreakingNews(Base):
    __tablename__ = "breaking_news"

    id = Column(String(36), primary_key=True, default=new_id)
    text = Column(Text, nullable=False)
    link = Column(String, nullable=True)
    status = Column(String(20), nullable=False)


class QuickLink(Base):
    __tablename__ = "quick_links"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False, index=True)
    category = Column(String, nullable=True)
    url = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(String(20), nullable=False)


class UpcomingExam(Base):
    __tablename__ = "upcoming_exams"

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String, nullable=False)
    deadline = Column(Date, nullable=False, index=True)
    notification_link = Column(String, nullable=False)

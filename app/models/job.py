import enum
from sqlalchemy import Column, Date, DateTime, String, Text
from app.core.database import Base
from app.core.serialization import parse_json_list
from app.models.base import new_id, utcnow


class JobStatus(str, enum.Enum):
    """
    Listing status shown on the public site.

    - ACTIVE: open for applications
    - CLOSING_SOON: last date is near
    - EXPIRED: closed; dropped from the sitemap
    """
    ACTIVE = "active"
    CLOSING_SOON = "closing-soon"
    EXPIRED = "expired"


class Job(Base):
    """
    A job listing.

    Affiliate course/book suggestions are stored as serialized JSON text and
    always read back as lists.
    """
    __tablename__ = "jobs"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False, index=True)
    department = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    qualification = Column(Text, nullable=False)
    vacancies = Column(String, nullable=False)
    posted_date = Column(Date, nullable=False)
    last_date = Column(Date, nullable=False)
    apply_link = Column(String, nullable=False)
    status = Column(String(20), nullable=False, default=JobStatus.ACTIVE.value, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    affiliate_courses_json = Column(Text, nullable=True)
    affiliate_books_json = Column(Text, nullable=True)

    @property
    def affiliate_courses(self) -> list:
        return parse_json_list(self.affiliate_courses_json)

    @property
    def affiliate_books(self) -> list:
        return parse_json_list(self.affiliate_books_json)

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', status={self.status})>"

"""
CRUD operations for Job model.

Jobs carry two JSON text columns (affiliate courses and books); this module
owns turning payload lists into that text.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.serialization import dump_json
from app.crud.base import CRUDBase
from app.models.job import Job, JobStatus
from app.schemas.common import parse_date
from app.schemas.job import JobPayload

jobs = CRUDBase(Job, order_by=(Job.created_at.desc(),))


def _columns(payload: JobPayload, default_status: Optional[str] = None) -> dict:
    """Map a validated payload onto Job columns."""
    status = payload.status.value if payload.status else default_status
    return {
        "title": payload.title,
        "department": payload.department,
        "category": payload.category,
        "description": payload.description,
        "qualification": payload.qualification,
        "vacancies": str(payload.vacancies),
        "posted_date": parse_date(payload.posted_date),
        "last_date": parse_date(payload.last_date),
        "apply_link": payload.apply_link,
        "status": status,
        "affiliate_courses_json": dump_json(payload.affiliate_courses or []),
        "affiliate_books_json": dump_json(payload.affiliate_books or []),
    }


def create(db: Session, payload: JobPayload) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        payload: Validated job data

    Returns:
        Created Job instance, re-read from the store
    """
    return jobs.create(db, **_columns(payload, default_status=JobStatus.ACTIVE.value))


def create_many(db: Session, payloads: List[JobPayload]) -> List[Job]:
    """
    Insert a batch of validated jobs in one commit.

    Bulk uploads always start out active, whatever status was sent.
    """
    rows = []
    for payload in payloads:
        columns = _columns(payload)
        columns["status"] = JobStatus.ACTIVE.value
        rows.append(Job(**columns))

    db.add_all(rows)
    db.commit()

    ids = [row.id for row in rows]
    return db.query(Job).filter(Job.id.in_(ids)).order_by(Job.created_at.desc()).all()


def update(db: Session, job_id: str, payload: JobPayload) -> Optional[Job]:
    """
    Overwrite a job with the payload.

    Returns:
        Updated Job, or None if no job has this id
    """
    existing = jobs.get(db, job_id)
    if existing is None:
        return None
    return jobs.update(db, job_id, **_columns(payload, default_status=existing.status))


def list_for_sitemap(db: Session) -> List[Job]:
    """Jobs that still deserve a public URL."""
    return db.query(Job).filter(Job.status != JobStatus.EXPIRED.value).all()

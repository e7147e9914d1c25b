from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from app.models.job import JobStatus
from app.schemas.common import Payload, Record, first_missing, parse_date

JOB_REQUIRED_FIELDS = (
    "title", "department", "category", "description", "qualification",
    "vacancies", "postedDate", "lastDate", "applyLink",
)


class JobPayload(Payload):
    """Schema for creating or updating a job"""
    id: Optional[str] = None
    title: Optional[str] = None
    department: Optional[str] = None
    category: Optional[str] = None
    description: Optional[str] = None
    qualification: Optional[str] = None
    vacancies: Optional[Union[int, str]] = None
    posted_date: Optional[str] = None
    last_date: Optional[str] = None
    apply_link: Optional[str] = None
    status: Optional[JobStatus] = None
    affiliate_courses: Optional[List[Dict[str, Any]]] = None
    affiliate_books: Optional[List[Dict[str, Any]]] = None


def validate_job(job: JobPayload) -> Optional[str]:
    """Return the first validation problem of a job payload, or None."""
    data = job.wire()
    missing = first_missing(data, JOB_REQUIRED_FIELDS)
    if missing:
        return missing
    if parse_date(job.posted_date) is None or parse_date(job.last_date) is None:
        return "Invalid date format for postedDate or lastDate. Use YYYY-MM-DD."
    return None


class JobRecord(Record):
    """Schema for job response"""
    id: str
    title: str
    department: str
    category: str
    description: str
    qualification: str
    vacancies: str
    posted_date: date
    last_date: date
    apply_link: str
    status: str
    created_at: datetime
    affiliate_courses: List[Any] = []
    affiliate_books: List[Any] = []

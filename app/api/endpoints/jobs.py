"""
Job listing endpoints.

POST accepts either one job or an array (bulk upload). Every write is
followed by an audit entry.
"""

import logging
from typing import Any, List, Union

from fastapi import APIRouter, Body, Depends, Response, status
from pydantic import TypeAdapter
from sqlalchemy.orm import Session

from app.api.helpers import check, delete_one_or_many, not_found, require_update_id
from app.core.database import get_db
from app.crud import activity_log
from app.crud import job as job_crud
from app.schemas.common import DeleteRequest
from app.schemas.job import JobPayload, JobRecord, validate_job

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)

_job_list = TypeAdapter(List[JobPayload])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_jobs(
    body: Union[List[Any], dict] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Create one job, or many from a JSON array.

    Bulk flow:
    1. Validate every item; the first bad one fails the whole batch
    2. Insert all rows as `active`
    3. Log one "Bulk Job Upload" entry
    4. Return the created jobs re-read from the store
    """
    if isinstance(body, list):
        if not body:
            return []

        payloads = _job_list.validate_python(body)
        for index, payload in enumerate(payloads, start=1):
            check(validate_job(payload), prefix=f"Validation Error on item {index}")

        created = job_crud.create_many(db, payloads)
        logger.info(f"Bulk created {len(created)} jobs")
        activity_log.record(db, "Bulk Job Upload", f"{len(created)} jobs added.")
        return [JobRecord.model_validate(job).wire() for job in created]

    payload = JobPayload.model_validate(body)
    check(validate_job(payload))

    job = job_crud.create(db, payload)
    logger.info(f"Created job {job.id}: {job.title}")
    activity_log.record(db, "Job Created", f"New job added: {job.title}")
    return JobRecord.model_validate(job).wire()


@router.put("")
def update_job(payload: JobPayload, db: Session = Depends(get_db)):
    """Overwrite a job; the response is the row as stored."""
    job_id = require_update_id(payload.id, "Job")
    check(validate_job(payload))

    job = job_crud.update(db, job_id, payload)
    if job is None:
        raise not_found("Job", job_id)

    activity_log.record(db, "Job Updated", f"Job updated: {job.title}")
    return JobRecord.model_validate(job).wire()


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def delete_jobs(body: DeleteRequest, db: Session = Depends(get_db)):
    """Delete `{id}` or `{ids: [...]}`."""
    delete_one_or_many(
        db, job_crud.jobs, body,
        entity="Job", action="Job Deleted", bulk_action="Bulk Job Deletion", noun="jobs",
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Helpers shared by the resource routers: validation failures, id checks,
and the single/bulk delete flow.
"""

from typing import Callable, Optional

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, ValidationError
from app.crud import activity_log
from app.crud.base import CRUDBase
from app.schemas.common import DeleteRequest

MISSING_DELETE_ID = "An ID or an array of IDs is required for deletion."


def check(problem: Optional[str], prefix: str = "Validation Error") -> None:
    """Raise a 400 for the validator's message, if it returned one."""
    if problem:
        raise ValidationError(f"{prefix}: {problem}")


def require_update_id(id: Optional[str], entity: str) -> str:
    if not id:
        raise ValidationError(f"{entity} ID is required for updates.")
    return id


def not_found(entity: str, id: str) -> NotFoundError:
    return NotFoundError(f"{entity} with ID {id} not found.")


def delete_one(
    db: Session,
    repo: CRUDBase,
    body: DeleteRequest,
    entity: str,
    action: Optional[str],
    describe: Optional[Callable[[str], str]] = None,
) -> None:
    """
    Delete the row named by `body.id`, then log `action` (if any).

    Raises:
        ValidationError 400: No id given
        NotFoundError 404: No row with that id
    """
    if not body.id:
        raise ValidationError(MISSING_DELETE_ID)
    if not repo.delete(db, body.id):
        raise not_found(entity, body.id)
    if action:
        details = describe(body.id) if describe else f"{entity} with id {body.id} deleted."
        activity_log.record(db, action, details)


def delete_one_or_many(
    db: Session,
    repo: CRUDBase,
    body: DeleteRequest,
    entity: str,
    action: str,
    bulk_action: str,
    noun: str,
) -> None:
    """
    `ids` deletes every listed row and logs the count, even when zero;
    otherwise falls back to `delete_one`.
    """
    if body.ids is not None:
        count = repo.delete_many(db, body.ids)
        activity_log.record(db, bulk_action, f"{count} {noun} deleted.")
        return
    delete_one(db, repo, body, entity, action)

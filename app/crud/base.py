"""
Generic repository shared by every resource.

Each resource instantiates CRUDBase with its model; resource-specific
behaviour (JSON columns, bulk inserts) lives in its own module on top.
"""

from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """
    Create/read/update/delete for one model.

    Args:
        model: SQLAlchemy model class
        order_by: Default ordering for list(), e.g. Model.title.asc()
    """

    def __init__(self, model: Type[ModelType], order_by: Sequence[Any] = ()):
        self.model = model
        self.order_by = tuple(order_by)

    def get(self, db: Session, id: str) -> Optional[ModelType]:
        return db.get(self.model, id)

    def list(self, db: Session) -> List[ModelType]:
        """All rows in the resource's default order."""
        return db.query(self.model).order_by(*self.order_by).all()

    def count(self, db: Session) -> int:
        return db.query(func.count()).select_from(self.model).scalar() or 0

    def create(self, db: Session, **fields: Any) -> ModelType:
        """
        Insert one row and return it with its generated id.
        """
        obj = self.model(**fields)
        db.add(obj)
        db.commit()
        db.refresh(obj)
        return obj

    def update(self, db: Session, id: str, **fields: Any) -> Optional[ModelType]:
        """
        Overwrite the given columns of one row.

        Returns:
            Updated instance, or None if no row has this id
        """
        obj = self.get(db, id)
        if obj is None:
            return None

        for name, value in fields.items():
            setattr(obj, name, value)

        db.commit()
        db.refresh(obj)
        return obj

    def delete(self, db: Session, id: str) -> bool:
        """
        Delete one row by id.

        Returns:
            True if deleted, False if not found
        """
        deleted = db.query(self.model).filter(self.model.id == id).delete(synchronize_session=False)
        db.commit()
        return deleted > 0

    def delete_many(self, db: Session, ids: List[str]) -> int:
        """Delete every row whose id is listed; returns how many went."""
        if not ids:
            return 0
        deleted = db.query(self.model).filter(self.model.id.in_(ids)).delete(synchronize_session=False)
        db.commit()
        return deleted

    def delete_all(self, db: Session) -> int:
        deleted = db.query(self.model).delete(synchronize_session=False)
        db.commit()
        return deleted

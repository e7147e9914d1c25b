"""
Admin user repository.
"""

from typing import Optional

from sqlalchemy.orm import Session

from app.core.security import get_password_hash
from app.crud.base import CRUDBase
from app.models.base import utcnow
from app.models.user import User

users = CRUDBase(User)


def admin_exists(db: Session) -> bool:
    return users.count(db) > 0


def get_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()


def create_admin(db: Session, username: str, email: Optional[str], password: str) -> User:
    return users.create(
        db,
        username=username,
        email=email,
        password_hash=get_password_hash(password),
    )


def mark_login(db: Session, user: User) -> None:
    user.last_login_at = utcnow()
    db.commit()


def update_credentials(db: Session, user: User, username: str, password: str) -> User:
    user.username = username
    user.password_hash = get_password_hash(password)
    db.commit()
    db.refresh(user)
    return user


def set_password(db: Session, user_id: str, password: str) -> bool:
    """Overwrite the password hash; False when the user is gone."""
    user = users.get(db, user_id)
    if user is None:
        return False
    user.password_hash = get_password_hash(password)
    db.commit()
    return True

"""
Admin user model.

The portal has a single operator. Signup refuses once any row exists; nothing
at the database level enforces that.
"""

from sqlalchemy import Column, DateTime, String
from app.core.database import Base
from app.models.base import new_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    username = Column(String, unique=True, nullable=False, index=True)
    email = Column(String, nullable=True, index=True)
    password_hash = Column(String, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"

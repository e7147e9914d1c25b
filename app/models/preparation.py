from sqlalchemy import Column, String
from app.core.database import Base
from app.models.base import new_id


class PreparationBook(Base):
    """Recommended exam preparation book (usually an affiliate link)."""
    __tablename__ = "preparation_books"

    id = Column(String(36), primary_key=True, default=new_id)
    title = Column(String, nullable=False, index=True)
    author = Column(String, nullable=True)
    url = Column(String, nullable=False)
    image_url = Column(String, nullable=True)


class PreparationCourse(Base):
    """Recommended online course (Udemy, Testbook, ...)."""
    __tablename__ = "preparation_courses"

    id = Column(String(36), primary_key=True, default=new_id)
    platform = Column(String, nullable=True)
    title = Column(String, nullable=False, index=True)
    url = Column(String, nullable=False)

"""
Exam preparation resources: recommended books and courses.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.helpers import check, delete_one, not_found, require_update_id
from app.core.database import get_db
from app.core.deps import require_admin
from app.crud import activity_log
from app.crud.resources import books, courses
from app.schemas.common import DeleteRequest
from app.schemas.preparation import (
    BookPayload,
    BookRecord,
    CoursePayload,
    CourseRecord,
    validate_book,
    validate_course,
)

router = APIRouter(prefix="/preparation", tags=["Preparation"], dependencies=[Depends(require_admin)])


def _book_columns(payload: BookPayload) -> dict:
    return {"title": payload.title, "author": payload.author, "url": payload.url, "image_url": payload.image_url}


def _course_columns(payload: CoursePayload) -> dict:
    return {"platform": payload.platform, "title": payload.title, "url": payload.url}


@router.post("/books", status_code=status.HTTP_201_CREATED)
def create_book(payload: BookPayload, db: Session = Depends(get_db)):
    check(validate_book(payload))
    book = books.create(db, **_book_columns(payload))
    activity_log.record(db, "Prep Book Added", f"Book added: {book.title}")
    return BookRecord.model_validate(book).wire()


@router.put("/books")
def update_book(payload: BookPayload, db: Session = Depends(get_db)):
    book_id = require_update_id(payload.id, "Book")
    check(validate_book(payload))

    book = books.update(db, book_id, **_book_columns(payload))
    if book is None:
        raise not_found("Book", book_id)

    activity_log.record(db, "Prep Book Updated", f"Book updated: {book.title}")
    return BookRecord.model_validate(book).wire()


@router.delete("/books", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, books, body, "Book", "Prep Book Deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/courses", status_code=status.HTTP_201_CREATED)
def create_course(payload: CoursePayload, db: Session = Depends(get_db)):
    check(validate_course(payload))
    course = courses.create(db, **_course_columns(payload))
    activity_log.record(db, "Prep Course Added", f"Course added: {course.title}")
    return CourseRecord.model_validate(course).wire()


@router.put("/courses")
def update_course(payload: CoursePayload, db: Session = Depends(get_db)):
    course_id = require_update_id(payload.id, "Course")
    check(validate_course(payload))

    course = courses.update(db, course_id, **_course_columns(payload))
    if course is None:
        raise not_found("Course", course_id)

    activity_log.record(db, "Prep Course Updated", f"Course updated: {course.title}")
    return CourseRecord.model_validate(course).wire()


@router.delete("/courses", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(body: DeleteRequest, db: Session = Depends(get_db)):
    delete_one(db, courses, body, "Course", "Prep Course Deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

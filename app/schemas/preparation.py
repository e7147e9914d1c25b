from typing import Optional

from app.schemas.common import Payload, Record, first_missing


class BookPayload(Payload):
    id: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    image_url: Optional[str] = None


class CoursePayload(Payload):
    id: Optional[str] = None
    platform: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None


def validate_book(book: BookPayload) -> Optional[str]:
    return first_missing(book.wire(), ("title", "url"))


def validate_course(course: CoursePayload) -> Optional[str]:
    return first_missing(course.wire(), ("title", "url"))


class BookRecord(Record):
    id: str
    title: str
    author: Optional[str] = None
    url: str
    image_url: Optional[str] = None


class CourseRecord(Record):
    id: str
    platform: Optional[str] = None
    title: str
    url: str

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookbuddy.constants import BOOK_ID_PREFIX
from bookbuddy.models.base import is_prefixed_id
from bookbuddy.models.core import Book
from bookbuddy.services.validation import require, validate_isbn, validate_quantity

logger = logging.getLogger(__name__)

_BOOK_FIELDS = ("isbn", "title", "author", "summary", "cover_url", "language", "genre", "quantity", "text_language")


def is_record_id(value: str) -> bool:
    return is_prefixed_id(value, BOOK_ID_PREFIX)


def get_book_or_none(db: Session, book_id: str) -> Book | None:
    if not is_record_id(book_id):
        return None
    return db.get(Book, book_id)


def find_book(db: Session, slug: str, *, language: str) -> Book | None:
    by_isbn = db.scalar(select(Book).where(Book.isbn == slug, Book.language == language))
    if by_isbn is not None:
        logger.debug("Resolved slug %s by isbn (language=%s)", slug, language)
        return by_isbn

    by_id = get_book_or_none(db, slug)
    if by_id is not None:
        logger.debug("Resolved slug %s by record id", slug)
    return by_id


def upsert_book(db: Session, payload: dict[str, Any]) -> tuple[Book, bool]:
    values = {field: payload[field] for field in _BOOK_FIELDS if field in payload}
    validate_isbn(values.get("isbn", ""))
    validate_quantity(int(values.get("quantity", 0)))
    require(bool(values.get("language")), "language is required")
    if payload.get("book_id"):
        require(is_record_id(payload["book_id"]), f"Invalid book id: {payload['book_id']}")

    existing = db.scalar(select(Book).where(Book.isbn == values["isbn"], Book.language == values.get("language")))
    if existing is not None:
        for field, value in values.items():
            setattr(existing, field, value)
        db.flush()
        return existing, False

    book = Book(**values)
    if payload.get("book_id"):
        book.book_id = payload["book_id"]
    db.add(book)
    db.flush()
    return book, True

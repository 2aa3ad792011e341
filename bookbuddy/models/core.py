from sqlalchemy import CheckConstraint, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from bookbuddy.config import get_settings
from bookbuddy.constants import BOOK_ID_PREFIX
from bookbuddy.models.base import Base, TimestampedMixin, prefixed_id


class Book(Base, TimestampedMixin):
    __tablename__ = get_settings().collection_name
    __table_args__ = (
        UniqueConstraint("isbn", "language", name="uq_book_isbn_language"),
        CheckConstraint("quantity >= 0", name="ck_book_quantity_non_negative"),
        Index("ix_book_isbn", "isbn"),
    )

    book_id: Mapped[str] = mapped_column(String(32), primary_key=True, default=lambda: prefixed_id(BOOK_ID_PREFIX))
    isbn: Mapped[str] = mapped_column(String(32), nullable=False)
    title: Mapped[str] = mapped_column(String(512), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    summary: Mapped[str] = mapped_column(Text, default="", nullable=False)
    cover_url: Mapped[str] = mapped_column(String(2048), default="", nullable=False)
    language: Mapped[str] = mapped_column(String(16), nullable=False)
    genre: Mapped[str | None] = mapped_column(String(120), nullable=True)
    quantity: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    text_language: Mapped[str | None] = mapped_column(String(16), nullable=True)

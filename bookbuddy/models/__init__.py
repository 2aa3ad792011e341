from bookbuddy.models.base import Base
from bookbuddy.models.core import Book

__all__ = [
    "Base",
    "Book",
]

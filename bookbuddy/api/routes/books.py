from fastapi import APIRouter, HTTPException
from sqlalchemy.orm import Session

from bookbuddy.api.deps import AppSettings, DBSession
from bookbuddy.config import Settings
from bookbuddy.schemas import BookDetail
from bookbuddy.services.catalog import find_book
from bookbuddy.services.presentation import build_book_detail

router = APIRouter(prefix="/api/v1/books", tags=["books"])


@router.get("/{slug}", response_model=BookDetail)
def fetch_book(slug: str, db: Session = DBSession, settings: Settings = AppSettings) -> BookDetail:
    book = find_book(db, slug, language=settings.catalog_language)
    if book is None:
        raise HTTPException(status_code=404)
    return build_book_detail(book, settings)

from datetime import UTC, datetime

from fastapi import APIRouter
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from bookbuddy.api.deps import AppSettings, DBSession
from bookbuddy.config import Settings
from bookbuddy.models.core import Book
from bookbuddy.schemas import HealthDetailsResponse, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok", timestamp=datetime.now(UTC))


@router.get("/health/details", response_model=HealthDetailsResponse)
def health_details(db: Session = DBSession, settings: Settings = AppSettings) -> HealthDetailsResponse:
    db.execute(select(1))
    catalog_size = int(db.scalar(select(func.count()).select_from(Book)) or 0)
    return HealthDetailsResponse(
        status="ok",
        timestamp=datetime.now(UTC),
        database_ok=True,
        collection_name=settings.collection_name,
        catalog_size=catalog_size,
    )

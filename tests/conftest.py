import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_catalog.db")
os.environ.setdefault("COLLECTION_NAME", "book_inventory")
os.environ.setdefault("CATALOG_LANGUAGE", "en")

from bookbuddy.config import get_settings  # noqa: E402
from bookbuddy.database import SessionLocal, engine  # noqa: E402
from bookbuddy.main import create_app  # noqa: E402
from bookbuddy.models import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    get_settings.cache_clear()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client():
    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    with SessionLocal() as db:
        yield db
        db.rollback()

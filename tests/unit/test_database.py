import pytest
from sqlalchemy import select, text

from bookbuddy.database import build_engine, catalog_session
from bookbuddy.models.core import Book
from tests.helpers import build_book


def test_sqlite_engine_enables_foreign_keys(tmp_path):
    sqlite_engine = build_engine(f"sqlite+pysqlite:///{tmp_path / 'fk.db'}")
    with sqlite_engine.connect() as connection:
        assert connection.execute(text("PRAGMA foreign_keys")).scalar() == 1
    sqlite_engine.dispose()


def test_catalog_session_commits_on_success(db_session):
    with catalog_session() as db:
        db.add(build_book())
    assert db_session.scalar(select(Book).where(Book.isbn == "9786161234567")) is not None


def test_catalog_session_dry_run_rolls_back(db_session):
    with catalog_session(commit=False) as db:
        db.add(build_book())
        db.flush()
    assert db_session.scalar(select(Book)) is None


def test_catalog_session_rolls_back_on_error(db_session):
    with pytest.raises(RuntimeError):
        with catalog_session() as db:
            db.add(build_book())
            db.flush()
            raise RuntimeError("seed failed")
    assert db_session.scalar(select(Book)) is None

from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from bookbuddy.config import get_settings


def _enable_sqlite_foreign_keys(dbapi_connection, _) -> None:  # type: ignore[no-untyped-def]
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str) -> Engine:
    catalog_engine = create_engine(database_url, pool_pre_ping=True, future=True)
    if catalog_engine.dialect.name == "sqlite":
        event.listen(catalog_engine, "connect", _enable_sqlite_foreign_keys)
    return catalog_engine


engine = build_engine(get_settings().database_url)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def ensure_schema(bind: Engine) -> None:
    from bookbuddy.models import Base, Book

    Base.metadata.create_all(bind=bind, tables=[Book.__table__])


@contextmanager
def catalog_session(*, commit: bool = True) -> Iterator[Session]:
    with SessionLocal() as db:
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        if commit:
            db.commit()
        else:
            db.rollback()


def get_db() -> Generator[Session]:
    with SessionLocal() as db:
        yield db

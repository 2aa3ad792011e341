from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from bookbuddy.api.routes import books, health
from bookbuddy.database import SessionLocal, engine, ensure_schema
from bookbuddy.web.routes import router as web_router

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(_: FastAPI):
    ensure_schema(engine)
    with SessionLocal() as db:
        db.execute(text("SELECT 1"))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="BookBuddy Catalog",
        version="0.1.0",
        description="Book detail pages with derived display prices.",
        lifespan=lifespan,
    )

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(health.router)
    app.include_router(books.router)
    app.include_router(web_router)

    return app


app = create_app()

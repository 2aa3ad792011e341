from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime


class HealthDetailsResponse(BaseModel):
    status: str
    timestamp: datetime
    database_ok: bool
    collection_name: str
    catalog_size: int


class BookDetail(BaseModel):
    book_id: str
    isbn: str
    title: str
    author: str
    summary: str
    summary_text: str
    language: str
    genre: str | None = None
    genre_text: str
    quantity: int
    stock_text: str
    image_src: str
    cover_url: str
    price: int
    price_text: str


class CartItemForm(BaseModel):
    book_id: str = Field(min_length=1)
    title: str
    cover: str = ""
    price: int = Field(ge=0)


class BookSeed(BaseModel):
    book_id: str | None = None
    isbn: str
    title: str
    author: str
    summary: str = ""
    cover_url: str = ""
    language: str
    genre: str | None = None
    quantity: int = Field(default=0, ge=0)
    text_language: str | None = None

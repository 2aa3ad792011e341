from bookbuddy.config import Settings
from bookbuddy.constants import EMPTY_SUMMARY_TEXT, STOCK_OUT_TEXT
from bookbuddy.models.core import Book
from bookbuddy.schemas import BookDetail
from bookbuddy.services.formatting import format_price
from bookbuddy.services.pricing import PricingPolicy, derive_book_price


def resolve_image_src(cover_url: str | None, placeholder: str) -> str:
    if cover_url and cover_url.strip():
        return cover_url
    return placeholder


def stock_text(quantity: int) -> str:
    if quantity > 0:
        return f"{quantity} available"
    return STOCK_OUT_TEXT


def build_book_detail(book: Book, settings: Settings) -> BookDetail:
    price = derive_book_price(book, PricingPolicy.from_settings(settings))
    price_text = format_price(
        price,
        locale=settings.price_locale,
        currency=settings.price_currency,
        symbol=settings.price_symbol,
    )
    return BookDetail(
        book_id=book.book_id,
        isbn=book.isbn,
        title=book.title,
        author=book.author,
        summary=book.summary or "",
        summary_text=book.summary or EMPTY_SUMMARY_TEXT,
        language=book.language,
        genre=book.genre,
        genre_text=book.genre or settings.default_genre,
        quantity=book.quantity,
        stock_text=stock_text(book.quantity),
        image_src=resolve_image_src(book.cover_url, settings.placeholder_cover),
        cover_url=book.cover_url or "",
        price=price,
        price_text=price_text,
    )

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, HTTPException, Request
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from bookbuddy.config import Settings, get_settings
from bookbuddy.constants import CART_ACTION_PATH, CART_PRICE_FIELD
from bookbuddy.database import get_db
from bookbuddy.schemas import CartItemForm
from bookbuddy.services.catalog import find_book, get_book_or_none
from bookbuddy.services.presentation import build_book_detail

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))
router = APIRouter(tags=["web"])


@router.get("/books/{slug}")
def book_detail_page(
    request: Request,
    slug: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    book = find_book(db, slug, language=settings.catalog_language)
    if book is None:
        raise HTTPException(status_code=404)
    detail = build_book_detail(book, settings)
    return templates.TemplateResponse(
        request,
        "book_detail.html",
        {"book": detail, "cart_action": CART_ACTION_PATH, "cart_price_field": CART_PRICE_FIELD},
    )


@router.post(CART_ACTION_PATH)
def add_to_cart(
    request: Request,
    book_id: str = Form(alias="id", min_length=1),
    title: str = Form(...),
    cover: str = Form(default=""),
    price: int = Form(alias=CART_PRICE_FIELD, ge=0),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    item = CartItemForm(book_id=book_id, title=title, cover=cover, price=price)
    book = get_book_or_none(db, item.book_id)
    if book is None:
        raise HTTPException(status_code=404)
    detail = build_book_detail(book, settings)
    if item.price != detail.price:
        logger.warning("Rejected cart item %s: submitted price %s, derived %s", item.book_id, item.price, detail.price)
        raise HTTPException(status_code=400, detail="price_mismatch")
    return templates.TemplateResponse(request, "cart.html", {"item": item, "book": detail})

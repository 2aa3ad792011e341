from bookbuddy.services.pricing import derive_book_price
from tests.helpers import create_book


def _cart_form(book, price):
    return {"id": book.book_id, "title": book.title, "cover": book.cover_url, "priceTHB": str(price)}


def test_add_to_cart_confirms_item(client, db_session):
    book = create_book(db_session)
    response = client.post("/cart", data=_cart_form(book, derive_book_price(book)))
    assert response.status_code == 200
    assert "Added to cart" in response.text
    assert "Blade of the Quiet Moon" in response.text


def test_add_to_cart_rejects_tampered_price(client, db_session):
    book = create_book(db_session)
    response = client.post("/cart", data=_cart_form(book, derive_book_price(book) + 10))
    assert response.status_code == 400
    assert response.json()["detail"] == "price_mismatch"


def test_add_to_cart_unknown_book_returns_404(client, db_session):
    book = create_book(db_session)
    form = _cart_form(book, derive_book_price(book))
    form["id"] = "bk_ffffffffffffffff"
    assert client.post("/cart", data=form).status_code == 404


def test_add_to_cart_requires_price_field(client, db_session):
    book = create_book(db_session)
    form = _cart_form(book, 0)
    form.pop("priceTHB")
    assert client.post("/cart", data=form).status_code == 422


def test_add_to_cart_does_not_change_stock(client, db_session):
    book = create_book(db_session, quantity=1)
    client.post("/cart", data=_cart_form(book, derive_book_price(book)))
    db_session.expire_all()
    assert client.get("/api/v1/books/9786161234567").json()["quantity"] == 1


def test_cart_links_back_by_record_id(client, db_session):
    book = create_book(db_session, language="th")
    response = client.post("/cart", data=_cart_form(book, derive_book_price(book)))
    assert response.status_code == 200
    assert f'href="/books/{book.book_id}"' in response.text
    assert client.get(f"/books/{book.book_id}").status_code == 200

from bookbuddy.models.core import Book

LONG_SUMMARY = "A wandering swordsman returns to the village he once swore to protect. " * 40


def build_book(**overrides) -> Book:
    values = {
        "isbn": "9786161234567",
        "title": "Blade of the Quiet Moon",
        "author": "Aiko Tanaka",
        "summary": "A wandering swordsman returns home.",
        "cover_url": "https://covers.example.com/quiet-moon.jpg",
        "language": "en",
        "genre": "Action",
        "quantity": 4,
    }
    values.update(overrides)
    return Book(**values)


def create_book(db, **overrides) -> Book:
    book = build_book(**overrides)
    db.add(book)
    db.commit()
    db.refresh(book)
    return book

class ValidationError(ValueError):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ValidationError(message)


def validate_quantity(quantity: int) -> None:
    require(quantity >= 0, "quantity must be >= 0")


def validate_isbn(isbn: str) -> None:
    require(bool(isbn and isbn.strip()), "isbn is required")
    require(len(isbn) <= 32, "isbn must be at most 32 characters")

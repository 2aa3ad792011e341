import logging

from babel.core import UnknownLocaleError
from babel.numbers import format_currency

from bookbuddy.constants import PRICE_FORMAT_PATTERN

logger = logging.getLogger(__name__)


def fallback_price_text(amount: int, symbol: str) -> str:
    return f"{symbol}{amount:,}"


def format_price(amount: int, *, locale: str = "th_TH", currency: str = "THB", symbol: str = "฿") -> str:
    try:
        return format_currency(
            amount,
            currency,
            format=PRICE_FORMAT_PATTERN,
            locale=locale,
            currency_digits=False,
        )
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        logger.warning("Price formatting failed for locale=%s currency=%s: %s", locale, currency, exc)
        return fallback_price_text(amount, symbol)

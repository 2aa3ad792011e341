from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

from bookbuddy.constants import PRICE_ROUNDING_STEP
from bookbuddy.services.validation import require

if TYPE_CHECKING:
    from bookbuddy.config import Settings
    from bookbuddy.models.core import Book

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_HASH_MULTIPLIER = 31


@dataclass(frozen=True)
class PricingPolicy:
    band_min: int = 180
    band_max: int = 420
    content_cap: int = 2000
    content_weight: float = 0.25
    rounding_step: int = PRICE_ROUNDING_STEP

    def __post_init__(self) -> None:
        require(self.band_min >= 0, "band_min must be >= 0")
        require(self.band_max >= self.band_min, "band_max must be >= band_min")
        require(self.content_cap >= 1, "content_cap must be >= 1")
        require(self.content_weight >= 0, "content_weight must be >= 0")
        require(self.rounding_step >= 1, "rounding_step must be >= 1")

    @classmethod
    def from_settings(cls, settings: Settings) -> PricingPolicy:
        return cls(
            band_min=settings.price_band_min,
            band_max=settings.price_band_max,
            content_cap=settings.price_content_cap,
            content_weight=settings.price_content_weight,
        )


DEFAULT_POLICY = PricingPolicy()


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (_INT32_MASK + 1) if value & _INT32_SIGN else value


def _utf16_code_units(value: str) -> list[int]:
    raw = value.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(raw[index : index + 2], "little") for index in range(0, len(raw), 2)]


def seed_hash(seed: str | None) -> int:
    """Stable non-negative hash of ``seed`` using 32-bit signed ``h * 31 + c`` steps."""
    accumulator = 0
    for code in _utf16_code_units(seed or ""):
        accumulator = _to_int32(accumulator * _HASH_MULTIPLIER + code)
    return abs(accumulator)


def seeded_band_value(seed: str | None, band_min: int, band_max: int) -> int:
    return band_min + seed_hash(seed) % (band_max - band_min + 1)


def content_factor(summary_length: int, policy: PricingPolicy = DEFAULT_POLICY) -> float:
    capped = min(policy.content_cap, max(0, summary_length))
    return min(1.0 + policy.content_weight, 1.0 + (capped / policy.content_cap) * policy.content_weight)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def derive_price(seed: str | None, summary_length: int, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    """Deterministic display price for a catalog item.

    The base price is picked from ``[band_min, band_max]`` by hashing ``seed``,
    scaled up by the description length and rounded to the nearest
    ``rounding_step`` (halves round up).
    """
    base = seeded_band_value(seed, policy.band_min, policy.band_max)
    factor = content_factor(summary_length, policy)
    step = policy.rounding_step
    return _round_half_up((base * factor) / step) * step


def price_seed(book: Book) -> str:
    return book.isbn or str(book.book_id or "")


def summary_length(summary: str | None) -> int:
    return len(_utf16_code_units(summary or ""))


def derive_book_price(book: Book, policy: PricingPolicy = DEFAULT_POLICY) -> int:
    return derive_price(price_seed(book), summary_length(book.summary), policy)

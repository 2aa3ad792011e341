from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    database_url: str = Field(alias="DATABASE_URL")
    collection_name: str = Field(default="book_inventory", alias="COLLECTION_NAME")
    catalog_language: str = Field(default="en", alias="CATALOG_LANGUAGE")

    price_locale: str = Field(default="th_TH", alias="PRICE_LOCALE")
    price_currency: str = Field(default="THB", alias="PRICE_CURRENCY")
    price_symbol: str = Field(default="฿", alias="PRICE_SYMBOL")
    price_band_min: int = Field(default=180, alias="PRICE_BAND_MIN")
    price_band_max: int = Field(default=420, alias="PRICE_BAND_MAX")
    price_content_cap: int = Field(default=2000, alias="PRICE_CONTENT_CAP")
    price_content_weight: float = Field(default=0.25, alias="PRICE_CONTENT_WEIGHT")

    placeholder_cover: str = Field(default="/placeholder-cover.png", alias="PLACEHOLDER_COVER")
    default_genre: str = Field(default="Manga", alias="DEFAULT_GENRE")

    @model_validator(mode="after")
    def validate_required_runtime(self) -> "Settings":
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL is required")
        if not self.collection_name.strip():
            raise ValueError("COLLECTION_NAME must not be blank")
        if not self.catalog_language.strip():
            raise ValueError("CATALOG_LANGUAGE must not be blank")
        if self.price_band_min < 0:
            raise ValueError("PRICE_BAND_MIN must be >= 0")
        if self.price_band_max < self.price_band_min:
            raise ValueError("PRICE_BAND_MAX must be >= PRICE_BAND_MIN")
        if self.price_content_cap < 1:
            raise ValueError("PRICE_CONTENT_CAP must be >= 1")
        if self.price_content_weight < 0:
            raise ValueError("PRICE_CONTENT_WEIGHT must be >= 0")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

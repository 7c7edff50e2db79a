"""
Product models for the Product Link Scraper.

ScrapedProductData is the contract between extraction and whatever stores
the catalog item. Field validators enforce its invariants, so an instance
that reaches a caller is always within bounds.
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.config import config
from app.utils.urls import is_acceptable_image_url


class ScrapedProductData(BaseModel):
    """
    Product metadata extracted from one page.

    Any field except url may be None when no source on the page produced
    a plausible value. url is the input URL, echoed unchanged.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    price: Optional[float] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    supplier: Optional[str] = None
    description: Optional[str] = None
    url: str

    @field_validator("price")
    @classmethod
    def check_price_bounds(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and not 0 < value < config.PRICE_UPPER_BOUND:
            raise ValueError(f"price {value} outside (0, {config.PRICE_UPPER_BOUND})")
        return value

    @field_validator("title")
    @classmethod
    def check_title_length(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not 1 <= len(value) <= config.TITLE_MAX_LENGTH:
            raise ValueError(f"title length {len(value)} outside [1, {config.TITLE_MAX_LENGTH}]")
        return value

    @field_validator("image_url")
    @classmethod
    def check_image_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_acceptable_image_url(value):
            raise ValueError(f"unusable image URL: {value}")
        return value

    def get_present_fields(self) -> List[str]:
        """Return the extracted fields that have a value."""
        return [
            name for name in ("title", "price", "image_url", "supplier")
            if getattr(self, name) is not None
        ]

    def get_missing_fields(self) -> List[str]:
        """Return the extracted fields left empty."""
        present = self.get_present_fields()
        return [
            name for name in ("title", "price", "image_url", "supplier")
            if name not in present
        ]

    def to_wire(self) -> dict:
        """Serialize with the camelCase names used on the wire."""
        return self.model_dump(by_alias=True)


class ScrapeResult(BaseModel):
    """Outcome of scraping one URL: either data or a user-facing error."""
    success: bool
    data: Optional[ScrapedProductData] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, data: ScrapedProductData) -> "ScrapeResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: str, error_type: str) -> "ScrapeResult":
        return cls(success=False, error=error, error_type=error_type)

"""
Selector tables for product field extraction.

Each table is an ordered tuple of SelectorStrategy: most trustworthy first
(schema.org microdata), then retailer-specific markup, then generic class
names, then page-level fallbacks (h1, Open Graph meta, <title>) which match
almost everywhere and therefore go last.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple

from app.config import config


@dataclass(frozen=True)
class SelectorStrategy:
    """A CSS selector and, optionally, the attribute that holds the value."""
    selector: str
    attribute: Optional[str] = None


@dataclass(frozen=True)
class ExtractionLimits:
    """
    Plausibility limits applied while extracting.

    Defaults come from configuration. Overrides may only tighten the bounds,
    because ScrapedProductData validates against the configured values.
    """
    price_upper_bound: float = field(default_factory=lambda: config.PRICE_UPPER_BOUND)
    price_candidates_per_selector: int = field(default_factory=lambda: config.PRICE_CANDIDATES_PER_SELECTOR)
    title_max_length: int = field(default_factory=lambda: config.TITLE_MAX_LENGTH)
    supplier_max_length: int = field(default_factory=lambda: config.SUPPLIER_MAX_LENGTH)

    def __post_init__(self):
        if not 0 < self.price_upper_bound <= config.PRICE_UPPER_BOUND:
            raise ValueError("price_upper_bound must be in (0, PRICE_UPPER_BOUND]")
        if not 0 < self.title_max_length <= config.TITLE_MAX_LENGTH:
            raise ValueError("title_max_length must be in (0, TITLE_MAX_LENGTH]")
        if self.price_candidates_per_selector < 1:
            raise ValueError("price_candidates_per_selector must be at least 1")
        if self.supplier_max_length < 1:
            raise ValueError("supplier_max_length must be at least 1")


# Attributes that may hold an image URL, in the order they are read
IMAGE_ATTRIBUTES: Tuple[str, ...] = (
    "src",
    "data-src",
    "data-lazy-src",
    "data-original",
    "data-zoom-image",
    "data-large",
)


TITLE_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy('h1[itemprop="name"]'),
    SelectorStrategy('[itemprop="name"]'),
    SelectorStrategy("h1.product-title"),
    SelectorStrategy("h1.product-name"),
    SelectorStrategy('h1[data-testid="product-title"]'),
    SelectorStrategy('[data-testid="product-name"]'),
    SelectorStrategy("#productTitle"),
    SelectorStrategy(".pip-header-section__title--big"),
    SelectorStrategy(".product-title h1"),
    SelectorStrategy(".product-name h1"),
    SelectorStrategy(".product-title"),
    SelectorStrategy(".product-name"),
    SelectorStrategy("h1"),
    SelectorStrategy('meta[property="og:title"]'),
    SelectorStrategy('meta[name="twitter:title"]'),
    SelectorStrategy("title"),
)


PRICE_META_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy('meta[property="product:price:amount"]'),
    SelectorStrategy('meta[property="og:price:amount"]'),
    SelectorStrategy('meta[itemprop="price"]'),
    SelectorStrategy('meta[name="twitter:data1"]'),
)


PRICE_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy('[itemprop="price"]'),
    SelectorStrategy('[data-testid="product-price"]'),
    SelectorStrategy('[data-testid="price"]'),
    SelectorStrategy("#priceblock_ourprice"),
    SelectorStrategy("#priceblock_dealprice"),
    SelectorStrategy("#corePrice_feature_div .a-offscreen"),
    SelectorStrategy(".pip-temp-price__integer"),
    SelectorStrategy("[data-price]", attribute="data-price"),
    SelectorStrategy("[data-product-price]", attribute="data-product-price"),
    SelectorStrategy(".product-price"),
    SelectorStrategy(".current-price"),
    SelectorStrategy(".sale-price"),
    SelectorStrategy(".price"),
    SelectorStrategy('[class*="price"]'),
)


IMAGE_META_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy('meta[property="og:image"]'),
    SelectorStrategy('meta[property="og:image:secure_url"]'),
    SelectorStrategy('meta[name="twitter:image"]'),
    SelectorStrategy('meta[property="twitter:image"]'),
    SelectorStrategy('link[rel="image_src"]', attribute="href"),
)


IMAGE_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy('[itemprop="image"]'),
    SelectorStrategy('[data-testid="product-image"] img'),
    SelectorStrategy(".pip-media-grid__grid img"),
    SelectorStrategy("#landingImage"),
    SelectorStrategy("#imgBlkFront"),
    SelectorStrategy(".product-image img"),
    SelectorStrategy(".product-gallery img"),
    SelectorStrategy(".main-image img"),
    SelectorStrategy(".product-img img"),
)


SUPPLIER_STRATEGIES: Tuple[SelectorStrategy, ...] = (
    SelectorStrategy('[itemprop="brand"] [itemprop="name"]'),
    SelectorStrategy('[itemprop="brand"]'),
    SelectorStrategy('meta[property="product:brand"]'),
    SelectorStrategy('meta[property="og:brand"]'),
    SelectorStrategy('[data-testid="product-brand"]'),
    SelectorStrategy(".product-brand"),
    SelectorStrategy(".brand"),
    SelectorStrategy(".manufacturer"),
)

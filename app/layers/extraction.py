"""
Extraction Layer for the Product Link Scraper.
Turns fetched HTML into ScrapedProductData.
"""
from typing import Dict, List, Optional

from app.extractors.chain import ExtractionTier, ParsedDocument, StructuredDataTier, run_tiers
from app.extractors.strategies import (
    IMAGE_META_STRATEGIES,
    IMAGE_STRATEGIES,
    PRICE_META_STRATEGIES,
    PRICE_STRATEGIES,
    TITLE_STRATEGIES,
    ExtractionLimits,
)
from app.extractors.supplier import resolve_supplier_with_source
from app.extractors.waterfall import ImagePolicy, PricePolicy, SelectorWaterfall, TextPolicy
from app.models.product import ScrapedProductData
from app.utils.logger import LayerLogger


class ProductExtractionLayer:
    """
    Extraction Layer - reads product fields from a page.

    This layer:
    - Tries each field's sources in a fixed priority order
    - Keeps the first plausible value and never cross-checks fields
    - Leaves a field empty instead of failing when nothing fits

    It performs no I/O. Every call works on its own parsed tree, so one
    instance can serve concurrent requests.
    """

    def __init__(self, limits: Optional[ExtractionLimits] = None):
        self.logger = LayerLogger("extraction_layer")
        self.limits = limits or ExtractionLimits()

        self.title_tiers: List[ExtractionTier[str]] = [
            SelectorWaterfall("title_selectors", TITLE_STRATEGIES, TextPolicy("title_max_length")),
        ]
        self.price_tiers: List[ExtractionTier[float]] = [
            StructuredDataTier("price"),
            SelectorWaterfall("price_meta", PRICE_META_STRATEGIES, PricePolicy()),
            SelectorWaterfall("price_selectors", PRICE_STRATEGIES, PricePolicy()),
        ]
        self.image_tiers: List[ExtractionTier[str]] = [
            StructuredDataTier("image_url"),
            SelectorWaterfall("image_meta", IMAGE_META_STRATEGIES, ImagePolicy()),
            SelectorWaterfall("image_selectors", IMAGE_STRATEGIES, ImagePolicy()),
        ]

    def extract(self, html: str, url: str, base_url: Optional[str] = None) -> ScrapedProductData:
        """
        Extract product data from a page.

        Args:
            html: Page HTML as text
            url: The page URL, echoed back verbatim
            base_url: URL to resolve relative links against; defaults to url

        Returns:
            ScrapedProductData, with None for every field no source produced
        """
        self.logger.log_action("extract_product", "started", url=url, content_length=len(html))

        document = ParsedDocument.from_html(html, base_url or url, self.limits)

        title, title_source = run_tiers(self.title_tiers, document, "title", self.logger)
        price, price_source = run_tiers(self.price_tiers, document, "price", self.logger)
        image_url, image_source = run_tiers(self.image_tiers, document, "image_url", self.logger)
        supplier, supplier_source = resolve_supplier_with_source(document)

        product = ScrapedProductData(
            title=title,
            price=price,
            image_url=image_url,
            supplier=supplier,
            description=None,
            url=url,
        )

        sources: Dict[str, Optional[str]] = {
            "title": title_source,
            "price": price_source,
            "image_url": image_source,
            "supplier": supplier_source,
        }
        self.logger.log_extraction(
            url=url,
            fields_found=product.get_present_fields(),
            fields_missing=product.get_missing_fields(),
            sources=sources,
        )

        return product

"""
Supplier resolution: JSON-LD brand, then brand markup, then the site's
domain name.
"""
from typing import List, Optional, Tuple

from app.extractors.chain import CallableTier, ExtractionTier, ParsedDocument, StructuredDataTier, run_tiers
from app.extractors.strategies import SUPPLIER_STRATEGIES
from app.extractors.waterfall import SelectorWaterfall, TextPolicy
from app.utils.logger import LayerLogger
from app.utils.urls import domain_label

logger = LayerLogger("supplier_resolver")


def supplier_tiers() -> List[ExtractionTier[str]]:
    return [
        StructuredDataTier("brand"),
        SelectorWaterfall("brand_selectors", SUPPLIER_STRATEGIES, TextPolicy("supplier_max_length")),
        CallableTier("domain_name", lambda document: domain_label(document.base_url)),
    ]


def resolve_supplier_with_source(document: ParsedDocument) -> Tuple[Optional[str], Optional[str]]:
    """Resolve the supplier and report which tier produced it."""
    return run_tiers(supplier_tiers(), document, "supplier", logger)


def resolve_supplier(document: ParsedDocument) -> Optional[str]:
    """Resolve the product's supplier from the page and its URL."""
    value, _ = resolve_supplier_with_source(document)
    return value

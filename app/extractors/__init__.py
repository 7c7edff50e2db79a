"""Extractors package initialization."""
from app.extractors.strategies import SelectorStrategy, ExtractionLimits
from app.extractors.structured_data import StructuredProductData, extract_structured_data
from app.extractors.chain import ParsedDocument, ExtractionTier, StructuredDataTier, CallableTier, run_tiers
from app.extractors.waterfall import SelectorWaterfall, TextPolicy, PricePolicy, ImagePolicy
from app.extractors.supplier import resolve_supplier, resolve_supplier_with_source

__all__ = [
    "SelectorStrategy",
    "ExtractionLimits",
    "StructuredProductData",
    "extract_structured_data",
    "ParsedDocument",
    "ExtractionTier",
    "StructuredDataTier",
    "CallableTier",
    "run_tiers",
    "SelectorWaterfall",
    "TextPolicy",
    "PricePolicy",
    "ImagePolicy",
    "resolve_supplier",
    "resolve_supplier_with_source",
]

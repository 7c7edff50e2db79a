"""Layers package initialization."""
from app.layers.extraction import ProductExtractionLayer
from app.layers.ingestion import ProductIngestionLayer, validate_url

__all__ = [
    "ProductExtractionLayer",
    "ProductIngestionLayer",
    "validate_url",
]

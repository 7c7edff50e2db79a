"""
Tier chain shared by every extracted field.

A field is filled by trying a list of tiers in priority order and keeping the
first non-None value. Each tier sees the same ParsedDocument, so the JSON-LD
blocks are parsed once no matter how many tiers consult them.
"""
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar

from bs4 import BeautifulSoup

from app.extractors.strategies import ExtractionLimits
from app.extractors.structured_data import StructuredProductData, extract_structured_data
from app.utils.logger import LayerLogger

T = TypeVar("T")


@dataclass
class ParsedDocument:
    """A parsed page plus the URL its relative references resolve against."""
    soup: BeautifulSoup
    base_url: str
    limits: ExtractionLimits = field(default_factory=ExtractionLimits)

    @classmethod
    def from_html(cls, html: str, base_url: str, limits: Optional[ExtractionLimits] = None) -> "ParsedDocument":
        return cls(
            soup=BeautifulSoup(html, "lxml"),
            base_url=base_url,
            limits=limits or ExtractionLimits(),
        )

    @cached_property
    def structured_data(self) -> StructuredProductData:
        return extract_structured_data(self.soup, self.base_url, self.limits)


class ExtractionTier(Generic[T]):
    """One source of a field value. Subclasses implement try_extract."""

    name: str = "tier"

    def try_extract(self, document: ParsedDocument) -> Optional[T]:
        raise NotImplementedError


class StructuredDataTier(ExtractionTier[Any]):
    """Reads one attribute of the document's JSON-LD product data."""

    def __init__(self, attribute: str):
        self.attribute = attribute
        self.name = f"json_ld.{attribute}"

    def try_extract(self, document: ParsedDocument) -> Optional[Any]:
        return getattr(document.structured_data, self.attribute)


class CallableTier(ExtractionTier[T]):
    """Adapts a plain function of the document into a tier."""

    def __init__(self, name: str, func: Callable[[ParsedDocument], Optional[T]]):
        self.name = name
        self.func = func

    def try_extract(self, document: ParsedDocument) -> Optional[T]:
        return self.func(document)


def run_tiers(
    tiers: Sequence[ExtractionTier[T]],
    document: ParsedDocument,
    field_name: str,
    logger: LayerLogger,
) -> Tuple[Optional[T], Optional[str]]:
    """
    Try tiers in order and stop at the first value.

    A tier that raises is logged and counts as having found nothing.

    Returns:
        (value, name of the tier that produced it), or (None, None)
    """
    for index, tier in enumerate(tiers):
        try:
            value = tier.try_extract(document)
        except Exception as e:
            logger.log_error(
                f"Tier {tier.name} failed: {str(e)}",
                error_type=type(e).__name__,
                field=field_name,
                tier=tier.name,
            )
            value = None

        if value is not None:
            return value, tier.name

        if index + 1 < len(tiers):
            logger.log_fallback(
                from_source=tier.name,
                to_source=tiers[index + 1].name,
                reason="no_plausible_value",
                field=field_name,
            )

    return None, None

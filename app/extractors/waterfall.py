"""
Selector waterfall extraction.

Walks a field's selector table in order and returns the first value that the
field's read policy accepts. The walk is the same for every field; what
differs is how a matched element is read and what counts as plausible.
"""
import re
from typing import Generic, Optional, Sequence, TypeVar

from bs4 import Tag
from soupsieve import SelectorSyntaxError

from app.extractors.chain import ExtractionTier, ParsedDocument
from app.extractors.strategies import IMAGE_ATTRIBUTES, SelectorStrategy
from app.utils.logger import LayerLogger
from app.utils.price import is_plausible_price, normalize_price
from app.utils.urls import is_acceptable_image_url, resolve_url

T = TypeVar("T")

WHITESPACE_PATTERN = re.compile(r"\s+")

logger = LayerLogger("selector_waterfall")


def _attr(element: Tag, name: str) -> Optional[str]:
    value = element.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _clean_text(text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    text = WHITESPACE_PATTERN.sub(" ", text).strip()
    return text or None


def first_srcset_url(srcset: Optional[str]) -> Optional[str]:
    """First URL of a srcset list ("a.jpg 1x, b.jpg 2x" -> "a.jpg")."""
    if not srcset:
        return None
    first = srcset.split(",")[0].strip()
    return first.split()[0] if first else None


class ReadPolicy(Generic[T]):
    """How a field reads matched elements and what it accepts."""

    def candidates(self, document: ParsedDocument) -> int:
        """How many matching elements to examine per selector."""
        return 1

    def read(self, element: Tag, strategy: SelectorStrategy, document: ParsedDocument) -> Optional[T]:
        raise NotImplementedError


class TextPolicy(ReadPolicy[str]):
    """
    Title and supplier: content of a <meta>, otherwise the trimmed text,
    accepted when non-empty and within the length limit.
    """

    def __init__(self, limit_name: str):
        self.limit_name = limit_name

    def read(self, element: Tag, strategy: SelectorStrategy, document: ParsedDocument) -> Optional[str]:
        if strategy.attribute:
            text = _attr(element, strategy.attribute)
        elif element.name == "meta":
            text = _attr(element, "content")
        else:
            text = element.get_text(" ", strip=True)

        text = _clean_text(text)
        max_length = getattr(document.limits, self.limit_name)
        if text and len(text) <= max_length:
            return text
        return None


class PricePolicy(ReadPolicy[float]):
    """Price: several elements per selector, each normalized and bounds-checked."""

    def candidates(self, document: ParsedDocument) -> int:
        return document.limits.price_candidates_per_selector

    def read(self, element: Tag, strategy: SelectorStrategy, document: ParsedDocument) -> Optional[float]:
        raw = None
        if strategy.attribute:
            raw = _attr(element, strategy.attribute)
        if raw is None:
            raw = _attr(element, "content")
        if raw is None:
            raw = element.get_text(" ", strip=True)

        value = normalize_price(raw)
        if is_plausible_price(value, document.limits.price_upper_bound):
            return value

        if value is not None:
            logger.log_debug("price_candidate_rejected", selector=strategy.selector, value=value)
        return None


class ImagePolicy(ReadPolicy[str]):
    """Image: first present URL attribute, resolved, placeholders rejected."""

    def read(self, element: Tag, strategy: SelectorStrategy, document: ParsedDocument) -> Optional[str]:
        if strategy.attribute:
            ref = _attr(element, strategy.attribute)
        elif element.name == "meta":
            ref = _attr(element, "content")
        elif element.name == "link":
            ref = _attr(element, "href")
        else:
            ref = next(
                (value for value in (_attr(element, name) for name in IMAGE_ATTRIBUTES) if value),
                None,
            ) or first_srcset_url(_attr(element, "srcset"))

        resolved = resolve_url(ref, document.base_url)
        if is_acceptable_image_url(resolved):
            return resolved

        if resolved:
            logger.log_debug("image_candidate_rejected", selector=strategy.selector, url=resolved)
        return None


class SelectorWaterfall(ExtractionTier[T]):
    """Runs a selector table through a read policy, first accepted value wins."""

    def __init__(self, name: str, strategies: Sequence[SelectorStrategy], policy: ReadPolicy[T]):
        self.name = name
        self.strategies = tuple(strategies)
        self.policy = policy

    def try_extract(self, document: ParsedDocument) -> Optional[T]:
        limit = self.policy.candidates(document)

        for strategy in self.strategies:
            try:
                elements = document.soup.select(strategy.selector, limit=limit)
            except SelectorSyntaxError as e:
                logger.log_error(
                    f"Invalid selector {strategy.selector}: {str(e)}",
                    error_type="selector_syntax",
                    tier=self.name,
                )
                continue

            for element in elements:
                value = self.policy.read(element, strategy, document)
                if value is not None:
                    logger.log_decision(
                        decision="selector_matched",
                        reason=strategy.selector,
                        url=document.base_url,
                        tier=self.name,
                    )
                    return value

        return None

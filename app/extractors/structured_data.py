"""
JSON-LD product extraction.

Scans <script type="application/ld+json"> blocks in document order and
collects the first usable price, brand and image from schema.org Product
nodes. Each block is parsed on its own: a broken block is skipped and the
scan carries on with the next one.
"""
import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from app.extractors.strategies import ExtractionLimits
from app.utils.logger import LayerLogger
from app.utils.price import is_plausible_price
from app.utils.urls import is_acceptable_image_url, resolve_url

JSON_LD_TYPE = re.compile(r"application/ld\+json", re.I)

# Nesting limit when flattening @graph containers and arrays
MAX_FLATTEN_DEPTH = 10

logger = LayerLogger("structured_data")


@dataclass(frozen=True)
class StructuredProductData:
    """First qualifying value of each field found in JSON-LD, or None."""
    price: Optional[float] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class JsonLdParseResult:
    """Outcome of parsing one script block: data on success, error otherwise."""
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_json_ld_block(text: Optional[str]) -> JsonLdParseResult:
    """Parse one block's text without letting a failure escape."""
    if not text or not text.strip():
        return JsonLdParseResult(error="empty_block")

    try:
        return JsonLdParseResult(data=json.loads(text))
    except (ValueError, RecursionError) as e:
        return JsonLdParseResult(error=str(e))


def flatten_json_ld(data: Any, depth: int = 0) -> List[Dict[str, Any]]:
    """
    Flatten a JSON-LD payload into a list of schema nodes.

    Handles:
    - Single object with @type
    - @graph containers
    - Arrays of objects
    """
    nodes: List[Dict[str, Any]] = []
    if depth > MAX_FLATTEN_DEPTH:
        return nodes

    if isinstance(data, dict):
        if "@type" in data:
            nodes.append(data)
        graph = data.get("@graph")
        if isinstance(graph, list):
            for item in graph:
                nodes.extend(flatten_json_ld(item, depth + 1))
        elif isinstance(graph, dict):
            nodes.extend(flatten_json_ld(graph, depth + 1))

    elif isinstance(data, list):
        for item in data:
            nodes.extend(flatten_json_ld(item, depth + 1))

    return nodes


def is_product_node(node: Dict[str, Any]) -> bool:
    schema_type = node.get("@type")
    if isinstance(schema_type, list):
        return "Product" in schema_type
    return schema_type == "Product"


def _offer_price(offers: Any, limits: ExtractionLimits) -> Optional[float]:
    if isinstance(offers, list):
        offers = offers[0] if offers else None
    if not isinstance(offers, dict):
        return None

    raw = offers.get("price") or offers.get("lowPrice")
    if raw is None:
        spec = offers.get("priceSpecification")
        if isinstance(spec, list):
            spec = spec[0] if spec else None
        if isinstance(spec, dict):
            raw = spec.get("price")

    if raw is None or isinstance(raw, bool):
        return None

    try:
        value = float(str(raw).strip())
    except ValueError:
        return None

    return value if is_plausible_price(value, limits.price_upper_bound) else None


def _brand_name(brand: Any) -> Optional[str]:
    if isinstance(brand, list):
        brand = brand[0] if brand else None
    if isinstance(brand, dict):
        brand = brand.get("name")
    if isinstance(brand, str) and brand.strip():
        return brand.strip()
    return None


def _image_url(image: Any, base_url: str) -> Optional[str]:
    if isinstance(image, list):
        image = image[0] if image else None
    if isinstance(image, dict):
        image = image.get("url") or image.get("contentUrl")
    if not isinstance(image, str):
        return None

    resolved = resolve_url(image, base_url)
    return resolved if is_acceptable_image_url(resolved) else None


def extract_structured_data(
    soup: BeautifulSoup,
    base_url: str,
    limits: Optional[ExtractionLimits] = None,
) -> StructuredProductData:
    """
    Collect product price, brand and image from the page's JSON-LD.

    The first qualifying value of each field in document order wins.
    """
    limits = limits or ExtractionLimits()
    price: Optional[float] = None
    brand: Optional[str] = None
    image_url: Optional[str] = None
    product_nodes = 0

    for index, script in enumerate(soup.find_all("script", attrs={"type": JSON_LD_TYPE})):
        result = parse_json_ld_block(script.string or script.get_text())
        if not result.ok:
            logger.log_debug("json_ld_block_skipped", block_index=index, reason=result.error)
            continue

        for node in flatten_json_ld(result.data):
            if not is_product_node(node):
                continue
            product_nodes += 1

            if price is None:
                price = _offer_price(node.get("offers"), limits)
            if brand is None:
                brand = _brand_name(node.get("brand"))
            if image_url is None:
                image_url = _image_url(node.get("image"), base_url)

            if price is not None and brand is not None and image_url is not None:
                break

    logger.log_action(
        "json_ld_scan",
        "completed",
        product_nodes=product_nodes,
        found=[name for name, value in (("price", price), ("brand", brand), ("image_url", image_url)) if value is not None],
    )

    return StructuredProductData(price=price, brand=brand, image_url=image_url)

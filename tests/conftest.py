"""Shared fixtures for the scraper tests."""
import json

import pytest
from bs4 import BeautifulSoup

from app.extractors.chain import ParsedDocument
from app.layers.extraction import ProductExtractionLayer

PRODUCT_URL = "https://www.westwing.pl/produkt/stolik-tarse-123"


def page(head: str = "", body: str = "") -> str:
    """Wrap fragments in a minimal HTML document."""
    return f"<html><head>{head}</head><body>{body}</body></html>"


def json_ld(data) -> str:
    """A JSON-LD script tag holding data (or raw text, if a string)."""
    text = data if isinstance(data, str) else json.dumps(data)
    return f'<script type="application/ld+json">{text}</script>'


def parsed(html: str, base_url: str = PRODUCT_URL) -> ParsedDocument:
    return ParsedDocument(soup=BeautifulSoup(html, "lxml"), base_url=base_url)


@pytest.fixture
def extractor():
    return ProductExtractionLayer()

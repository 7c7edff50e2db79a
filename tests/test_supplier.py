"""
Tests for supplier resolution tiers.
"""
from app.extractors.supplier import resolve_supplier, resolve_supplier_with_source
from conftest import json_ld, page, parsed


class TestResolveSupplier:
    """JSON-LD brand, then brand markup, then domain name."""

    def test_domain_fallback_when_no_brand(self):
        document = parsed(page(body="<h1>Stolik</h1>"), "https://www.westwing.pl/produkt")
        assert resolve_supplier(document) == "Westwing"

    def test_json_ld_brand_wins_over_markup(self):
        html = page(
            head=json_ld({"@type": "Product", "brand": {"@type": "Brand", "name": "HAY"}}),
            body='<span class="brand">Other</span>',
        )
        value, source = resolve_supplier_with_source(parsed(html))
        assert value == "HAY"
        assert source == "json_ld.brand"

    def test_brand_markup_when_no_json_ld(self):
        html = page(body='<div itemprop="brand"><span itemprop="name">Bloomingville</span></div>')
        value, source = resolve_supplier_with_source(parsed(html))
        assert value == "Bloomingville"
        assert source == "brand_selectors"

    def test_manufacturer_class(self):
        html = page(body='<p class="manufacturer"> Kave Home </p>')
        assert resolve_supplier(parsed(html)) == "Kave Home"

    def test_overlong_brand_text_falls_back_to_domain(self):
        html = page(body=f'<div class="brand">{"word " * 30}</div>')
        value, source = resolve_supplier_with_source(parsed(html, "https://www.ikea.com/pl/p/1"))
        assert value == "Ikea"
        assert source == "domain_name"

    def test_nothing_available(self):
        assert resolve_supplier(parsed(page(), "about:blank")) is None

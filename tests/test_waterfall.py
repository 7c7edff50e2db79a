"""
Tests for the selector waterfall and its per-field read policies.
"""
from app.extractors.strategies import (
    IMAGE_STRATEGIES,
    PRICE_STRATEGIES,
    TITLE_STRATEGIES,
    ExtractionLimits,
    SelectorStrategy,
)
from app.extractors.waterfall import (
    ImagePolicy,
    PricePolicy,
    SelectorWaterfall,
    TextPolicy,
    first_srcset_url,
)
from conftest import page, parsed


def title_of(html: str):
    return SelectorWaterfall("title", TITLE_STRATEGIES, TextPolicy("title_max_length")).try_extract(parsed(html))


def price_of(html: str):
    return SelectorWaterfall("price", PRICE_STRATEGIES, PricePolicy()).try_extract(parsed(html))


def image_of(html: str):
    return SelectorWaterfall("image", IMAGE_STRATEGIES, ImagePolicy()).try_extract(parsed(html))


class TestTitle:
    """Title selectors and text reading."""

    def test_microdata_beats_generic_h1(self):
        html = page(body='<h1>Kategoria: stoliki</h1><h1 itemprop="name">Stolik Tarse</h1>')
        assert title_of(html) == "Stolik Tarse"

    def test_og_title_when_no_heading(self):
        html = page(head='<meta property="og:title" content="Stolik Tarse"/>')
        assert title_of(html) == "Stolik Tarse"

    def test_title_tag_is_last_resort(self):
        html = page(head="<title>Sklep | Stolik</title>")
        assert title_of(html) == "Sklep | Stolik"

    def test_whitespace_collapsed(self):
        html = page(body="<h1>\n  Sofa\n   Ludvig  </h1>")
        assert title_of(html) == "Sofa Ludvig"

    def test_too_long_text_skipped(self):
        html = page(head="<title>Short title</title>", body=f"<h1>{'x' * 501}</h1>")
        assert title_of(html) == "Short title"

    def test_empty_element_skipped(self):
        html = page(head='<meta property="og:title" content="From meta"/>', body="<h1>   </h1>")
        assert title_of(html) == "From meta"

    def test_nothing_found(self):
        assert title_of(page(body="<p>no title here</p>")) is None


class TestPrice:
    """Price selectors, normalization and the sanity bound."""

    def test_span_with_polish_price(self):
        assert price_of(page(body='<span class="price">489,00 zł</span>')) == 489.0

    def test_span_with_trailing_tax_label(self):
        assert price_of(page(body='<span class="price">489,00 zł brutto</span>')) == 489.0

    def test_content_attribute_preferred(self):
        html = page(body='<span itemprop="price" content="1299.00">1 299,00 zł</span>')
        assert price_of(html) == 1299.0

    def test_out_of_bound_value_skipped_for_next_selector(self):
        html = page(body=(
            '<span itemprop="price">15,000,000</span>'
            '<span class="price">129,00 zł</span>'
        ))
        assert price_of(html) == 129.0

    def test_out_of_bound_value_alone_gives_none(self):
        assert price_of(page(body='<div class="price">15,000,000</div>')) is None

    def test_examines_several_matches_per_selector(self):
        html = page(body=(
            '<span class="price">Cena:</span>'
            '<span class="price">49,99 zł</span>'
        ))
        assert price_of(html) == 49.99

    def test_stops_after_configured_number_of_matches(self):
        html = page(body=(
            '<span class="price">-</span>'
            '<span class="price">-</span>'
            '<span class="price">-</span>'
            '<span class="price">49,99 zł</span>'
        ))
        assert price_of(html) is None

    def test_candidate_count_is_overridable(self):
        html = page(body='<span class="price">-</span><span class="price">49,99 zł</span>')
        document = parsed(html)
        document.limits = ExtractionLimits(price_candidates_per_selector=1)
        tier = SelectorWaterfall("price", (SelectorStrategy(".price"),), PricePolicy())
        assert tier.try_extract(document) is None

    def test_data_attribute_strategy(self):
        html = page(body='<div data-price="249.90">Sprawdź cenę</div>')
        assert price_of(html) == 249.9


class TestImage:
    """Image attribute reading, resolution and placeholder rejection."""

    def test_relative_src_resolved(self):
        html = page(body='<div class="product-image"><img src="/media/sofa.jpg"></div>')
        assert image_of(html) == "https://www.westwing.pl/media/sofa.jpg"

    def test_lazy_attribute_when_src_missing(self):
        html = page(body='<div class="product-image"><img data-lazy-src="//cdn.pl/sofa.jpg"></div>')
        assert image_of(html) == "https://cdn.pl/sofa.jpg"

    def test_srcset_when_no_url_attribute(self):
        html = page(body='<div class="product-image"><img srcset="/a-400.jpg 400w, /a-800.jpg 800w"></div>')
        assert image_of(html) == "https://www.westwing.pl/a-400.jpg"

    def test_placeholder_rejected_and_next_selector_used(self):
        html = page(body=(
            '<div class="product-image"><img src="/static/placeholder.svg"></div>'
            '<div class="product-gallery"><img src="https://cdn.pl/real.jpg"></div>'
        ))
        assert image_of(html) == "https://cdn.pl/real.jpg"

    def test_microdata_meta_image(self):
        html = page(head='<meta itemprop="image" content="https://cdn.pl/micro.jpg">')
        assert image_of(html) == "https://cdn.pl/micro.jpg"

    def test_first_srcset_url(self):
        assert first_srcset_url("a.jpg 1x, b.jpg 2x") == "a.jpg"
        assert first_srcset_url("") is None


class TestSelectorTable:
    """Waterfall behavior independent of the shipped tables."""

    def test_order_decides_between_matches(self):
        html = page(body='<b class="one">First</b><b class="two">Second</b>')
        strategies = (SelectorStrategy(".two"), SelectorStrategy(".one"))
        tier = SelectorWaterfall("custom", strategies, TextPolicy("title_max_length"))
        assert tier.try_extract(parsed(html)) == "Second"

    def test_invalid_selector_skipped(self):
        html = page(body='<b class="one">First</b>')
        strategies = (SelectorStrategy("b[["), SelectorStrategy(".one"))
        tier = SelectorWaterfall("custom", strategies, TextPolicy("title_max_length"))
        assert tier.try_extract(parsed(html)) == "First"

    def test_explicit_attribute(self):
        html = page(body='<a class="brand-link" title="Bloomingville">logo</a>')
        strategies = (SelectorStrategy(".brand-link", attribute="title"),)
        tier = SelectorWaterfall("custom", strategies, TextPolicy("supplier_max_length"))
        assert tier.try_extract(parsed(html)) == "Bloomingville"

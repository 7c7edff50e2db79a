"""
Tests for URL resolution, image URL acceptance and domain labels.
"""
import pytest

from app.utils.urls import domain_label, is_acceptable_image_url, resolve_url


class TestResolveUrl:
    """Resolving page references against the page URL."""

    def test_root_relative(self):
        assert resolve_url("/img.jpg", "https://a.com/p/1") == "https://a.com/img.jpg"

    def test_protocol_relative_forced_to_https(self):
        assert resolve_url("//cdn.com/x.jpg", "https://a.com/p") == "https://cdn.com/x.jpg"

    def test_absolute_unchanged(self):
        assert resolve_url("http://cdn.com/x.jpg", "https://a.com/p") == "http://cdn.com/x.jpg"

    def test_document_relative(self):
        assert resolve_url("img/x.jpg", "https://a.com/p/1") == "https://a.com/p/img/x.jpg"

    def test_root_relative_keeps_port(self):
        assert resolve_url("/x.jpg", "http://localhost:8080/p") == "http://localhost:8080/x.jpg"

    @pytest.mark.parametrize("ref", [None, "", "   "])
    def test_empty_reference(self, ref):
        assert resolve_url(ref, "https://a.com/p") is None

    def test_root_relative_against_unusable_base(self):
        assert resolve_url("/img.jpg", "not a url") is None

    def test_malformed_base_does_not_raise(self):
        assert resolve_url("/img.jpg", "http://[::1") is None


class TestImageUrlAcceptance:
    """Which resolved image URLs may be returned."""

    def test_regular_image(self):
        assert is_acceptable_image_url("https://img/a.jpg")

    @pytest.mark.parametrize("url", [
        "https://cdn.shop.pl/assets/placeholder.png",
        "https://cdn.shop.pl/img/Loading-spinner.gif",
    ])
    def test_placeholder_assets_rejected(self, url):
        assert not is_acceptable_image_url(url)

    @pytest.mark.parametrize("url", [
        None,
        "",
        "data:image/gif;base64,R0lGOD",
        "/relative/only.jpg",
        "ftp://files.shop.pl/a.jpg",
    ])
    def test_non_http_urls_rejected(self, url):
        assert not is_acceptable_image_url(url)


class TestDomainLabel:
    """Supplier name derived from the hostname."""

    def test_strips_www_and_capitalizes(self):
        assert domain_label("https://www.ikea.com/pl/pl/p/1") == "Ikea"

    def test_polish_domain(self):
        assert domain_label("https://www.westwing.pl/produkt") == "Westwing"

    def test_subdomain_uses_second_to_last_label(self):
        assert domain_label("https://sklep.bodzio.pl/x") == "Bodzio"

    def test_single_label_host_returned_as_is(self):
        assert domain_label("http://localhost:8000/p") == "localhost"

    def test_no_hostname(self):
        assert domain_label("about:blank") is None

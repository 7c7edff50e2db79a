"""
Ingestion Layer for the Product Link Scraper.
Validates the pasted link, fetches the page and hands it to extraction.
"""
from typing import Optional

from pydantic import HttpUrl, TypeAdapter, ValidationError

from app.adapters.fetcher import DocumentFetcher
from app.errors import InvalidURLError, ScrapeError
from app.layers.extraction import ProductExtractionLayer
from app.models.product import ScrapeResult
from app.utils.logger import LayerLogger

_http_url = TypeAdapter(HttpUrl)


def validate_url(url: str) -> str:
    """
    Check that the input is an absolute http(s) URL.

    Surrounding whitespace is ignored. Returns the URL without it;
    raises InvalidURLError otherwise.
    """
    if not isinstance(url, str) or not url.strip():
        raise InvalidURLError(str(url))
    target = url.strip()
    try:
        _http_url.validate_python(target)
    except ValidationError as e:
        raise InvalidURLError(url) from e
    return target


class ProductIngestionLayer:
    """
    Ingestion Layer - one pasted link in, one ScrapeResult out.

    Only an invalid URL or a failed fetch produce success=False. A page
    that yields no data is still a success with empty fields, for the
    user to fill in manually.
    """

    def __init__(
        self,
        fetcher: Optional[DocumentFetcher] = None,
        extractor: Optional[ProductExtractionLayer] = None,
        locale: Optional[str] = None,
    ):
        self.logger = LayerLogger("ingestion_layer")
        self.fetcher = fetcher or DocumentFetcher()
        self.extractor = extractor or ProductExtractionLayer()
        self.locale = locale

    async def scrape(self, url: str) -> ScrapeResult:
        """
        Scrape product data from a URL.

        Args:
            url: The product page URL as pasted by the user

        Returns:
            ScrapeResult with data on success, or a localized error
        """
        self.logger.log_action("scrape", "started", url=url)

        try:
            target = validate_url(url)
            document = await self.fetcher.fetch(target)
        except ScrapeError as e:
            self.logger.log_decision(
                decision="scrape_failed",
                reason=str(e),
                url=url,
                error_type=e.error_type,
            )
            return ScrapeResult.failed(e.user_message(self.locale), e.error_type)

        # Echo the link as pasted; fetch and resolve against the trimmed one
        product = self.extractor.extract(document.html, url, base_url=target)

        self.logger.log_action(
            "scrape",
            "completed",
            url=url,
            fields_found=product.get_present_fields(),
        )
        return ScrapeResult.ok(product)

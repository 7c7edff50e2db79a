"""
Document Fetcher for the Product Link Scraper.
Downloads a product page as text. Retries, if wanted, belong to the caller.
"""
from dataclasses import dataclass
from typing import Optional

import httpx

from app.config import config
from app.errors import FetchFailedError
from app.utils.logger import LayerLogger


@dataclass
class FetchedDocument:
    """A successfully fetched page."""
    url: str
    final_url: str
    status_code: int
    html: str


class DocumentFetcher:
    """
    Fetches product pages over HTTP with browser-like headers.

    Non-2xx responses and network errors raise FetchFailedError; an empty
    body is never returned in their place.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        max_redirects: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.max_redirects = max_redirects if max_redirects is not None else config.MAX_REDIRECTS
        self.transport = transport
        self.logger = LayerLogger("document_fetcher")

    async def fetch(self, url: str) -> FetchedDocument:
        """
        Fetch a page.

        Args:
            url: Absolute URL of the product page

        Returns:
            FetchedDocument with the decoded HTML

        Raises:
            FetchFailedError: on a non-2xx status or any transport error
        """
        self.logger.log_action("fetch_html", "started", url=url)

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                max_redirects=self.max_redirects,
                headers=config.get_fetch_headers(),
                transport=self.transport,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                html = response.text

        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            self.logger.log_fetch(url, status_code, "http_error")
            raise FetchFailedError(url, f"HTTP {status_code}", status_code=status_code) from e

        except httpx.HTTPError as e:
            self.logger.log_error(
                f"Failed to fetch URL: {str(e)}",
                error_type=type(e).__name__,
                url=url
            )
            raise FetchFailedError(url, str(e) or type(e).__name__) from e

        self.logger.log_fetch(
            url,
            response.status_code,
            "ok",
            final_url=str(response.url),
            content_length=len(html),
        )

        return FetchedDocument(
            url=url,
            final_url=str(response.url),
            status_code=response.status_code,
            html=html,
        )

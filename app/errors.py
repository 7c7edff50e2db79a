"""
Errors that end a scrape, with user-facing messages.

Only an invalid input URL and a failed fetch stop a scrape. Anything that
goes wrong while reading the page itself leaves the affected field empty.
"""
from typing import Optional

from app.config import config

MESSAGES = {
    "pl": {
        "invalid_url": "Nieprawidłowy adres URL",
        "fetch_failed": "Nie udało się pobrać strony produktu",
        "fetch_failed_status": "Nie udało się pobrać strony produktu (kod {status_code})",
    },
    "en": {
        "invalid_url": "Invalid URL",
        "fetch_failed": "Failed to fetch URL",
        "fetch_failed_status": "Failed to fetch URL: {status_code}",
    },
}


def get_message(key: str, locale: Optional[str] = None, **params) -> str:
    """Look up a message in the configured locale, falling back to English."""
    table = MESSAGES.get(locale or config.LOCALE, MESSAGES["en"])
    template = table.get(key) or MESSAGES["en"][key]
    return template.format(**params)


class ScrapeError(Exception):
    """Base class for failures that stop a scrape."""

    error_type = "scrape_error"

    def user_message(self, locale: Optional[str] = None) -> str:
        return str(self)


class InvalidURLError(ScrapeError):
    """The input string is not an absolute http(s) URL."""

    error_type = "invalid_url"

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r}")

    def user_message(self, locale: Optional[str] = None) -> str:
        return get_message("invalid_url", locale)


class FetchFailedError(ScrapeError):
    """The page could not be fetched: non-2xx status or network error."""

    error_type = "fetch_failed"

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {reason}")

    def user_message(self, locale: Optional[str] = None) -> str:
        if self.status_code is not None:
            return get_message("fetch_failed_status", locale, status_code=self.status_code)
        return get_message("fetch_failed", locale)

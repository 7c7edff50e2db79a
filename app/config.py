"""
Configuration management for the Product Link Scraper.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Server settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "json")  # json or console

    # Fetch settings
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    MAX_REDIRECTS: int = int(os.getenv("MAX_REDIRECTS", "10"))
    USER_AGENT: str = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    )
    ACCEPT_LANGUAGE: str = os.getenv("ACCEPT_LANGUAGE", "pl-PL,pl;q=0.9,en;q=0.8")

    # Language of user-facing error messages (pl or en)
    LOCALE: str = os.getenv("LOCALE", "pl")

    # Extraction limits
    PRICE_UPPER_BOUND: float = float(os.getenv("PRICE_UPPER_BOUND", "10000000"))
    PRICE_CANDIDATES_PER_SELECTOR: int = int(os.getenv("PRICE_CANDIDATES_PER_SELECTOR", "3"))
    TITLE_MAX_LENGTH: int = int(os.getenv("TITLE_MAX_LENGTH", "500"))
    SUPPLIER_MAX_LENGTH: int = int(os.getenv("SUPPLIER_MAX_LENGTH", "100"))

    @classmethod
    def get_fetch_headers(cls) -> dict:
        """Request headers mimicking a browser."""
        return {
            "User-Agent": cls.USER_AGENT,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": cls.ACCEPT_LANGUAGE,
        }


config = Config()

"""Adapters package initialization."""
from app.adapters.fetcher import DocumentFetcher, FetchedDocument

__all__ = ["DocumentFetcher", "FetchedDocument"]

"""
URL helpers: resolving references found in a page against the page URL,
and deciding whether an image URL is usable.
"""
from typing import Optional
from urllib.parse import urljoin, urlparse

# Lazy-loading and stub assets that never show the product
PLACEHOLDER_MARKERS = ("placeholder", "loading")


def resolve_url(ref: Optional[str], base_url: str) -> Optional[str]:
    """
    Resolve a possibly relative reference against the page URL.

    Protocol-relative references are forced to https. Returns None for an
    empty reference or when either URL cannot be parsed.
    """
    if not ref:
        return None

    ref = ref.strip()
    if not ref:
        return None

    try:
        if ref.startswith("http"):
            return ref
        if ref.startswith("//"):
            return f"https:{ref}"
        if ref.startswith("/"):
            base = urlparse(base_url)
            if not base.scheme or not base.netloc:
                return None
            return f"{base.scheme}://{base.netloc}{ref}"
        return urljoin(base_url, ref)
    except ValueError:
        return None


def is_acceptable_image_url(url: Optional[str]) -> bool:
    """Absolute http(s) URL with a host that is not a placeholder asset."""
    if not url:
        return False

    try:
        parsed = urlparse(url)
    except ValueError:
        return False

    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return False

    lowered = url.lower()
    return not any(marker in lowered for marker in PLACEHOLDER_MARKERS)


def domain_label(url: str) -> Optional[str]:
    """
    Derive a display name from the site's domain.

    www.ikea.com -> Ikea. Takes the second-to-last label of the hostname,
    so multi-part suffixes (argos.co.uk) yield the suffix label.
    """
    try:
        hostname = urlparse(url).hostname
    except ValueError:
        return None

    if not hostname:
        return None

    if hostname.startswith("www."):
        hostname = hostname[len("www."):]

    parts = hostname.split(".")
    if len(parts) >= 2:
        label = parts[-2]
        return label[:1].upper() + label[1:]
    return hostname

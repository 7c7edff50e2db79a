"""
Locale-aware price normalization.

Turns a raw price-bearing fragment ("1 234,56 zł", "$1,234.56", "2990")
into a float. European notation (comma decimals) is tried before US notation
because the primary market writes prices that way. A fragment with no decimal
marker falls through to the bare-digit rule, so "1.234" reads as 1234.
A trailing per-unit suffix ("/szt", "/m2") and any label words around the
number ("Cena:", "brutto") are dropped before matching.
"""
import re
from typing import Optional

CURRENCY_PATTERN = re.compile(r"zł|PLN|EUR|€|\$|£", re.IGNORECASE)
WHITESPACE_PATTERN = re.compile(r"\s+")
# Per-unit suffix such as "/szt", "/ szt.", "/m2", "/kg"
UNIT_SUFFIX_PATTERN = re.compile(r"/\s*[^\W\d_]+\d*\.?\s*$")
NON_NUMERIC_PATTERN = re.compile(r"[^\d,.]")

# 1.234,56 / 1234,5 at the end of the string
EUROPEAN_PATTERN = re.compile(r"(\d+(?:\.\d{3})*),(\d{1,2})$")
# 1,234.56 / 1234.5 at the end of the string
US_PATTERN = re.compile(r"(\d+(?:,\d{3})*)\.(\d{1,2})$")
DIGITS_PATTERN = re.compile(r"\d+")


def normalize_price(text: Optional[str]) -> Optional[float]:
    """
    Convert a price fragment to a number.

    Args:
        text: Raw text from an attribute or element

    Returns:
        The parsed value, or None when the text contains no digits.
        No plausibility bound is applied here; callers check that.
    """
    if not text:
        return None

    cleaned = UNIT_SUFFIX_PATTERN.sub("", text.strip())
    cleaned = CURRENCY_PATTERN.sub("", cleaned)
    cleaned = WHITESPACE_PATTERN.sub("", cleaned)
    # Labels and units ("Cena:", "brutto") would break the end-anchored patterns
    cleaned = NON_NUMERIC_PATTERN.sub("", cleaned).strip(".,")

    match = EUROPEAN_PATTERN.search(cleaned)
    if match:
        integer_part = match.group(1).replace(".", "")
        return float(f"{integer_part}.{match.group(2)}")

    match = US_PATTERN.search(cleaned)
    if match:
        integer_part = match.group(1).replace(",", "")
        return float(f"{integer_part}.{match.group(2)}")

    digits = DIGITS_PATTERN.search(cleaned.replace(".", "").replace(",", ""))
    if digits:
        return float(digits.group())

    return None


def is_plausible_price(value: Optional[float], upper_bound: float) -> bool:
    """Sanity bound rejecting noise such as SKU numbers: 0 < value < upper_bound."""
    return value is not None and 0 < value < upper_bound

"""Utils package initialization."""
from app.utils.logger import get_logger, LayerLogger, set_trace_id, get_trace_id
from app.utils.price import normalize_price, is_plausible_price
from app.utils.urls import resolve_url, is_acceptable_image_url, domain_label

__all__ = [
    "get_logger",
    "LayerLogger",
    "set_trace_id",
    "get_trace_id",
    "normalize_price",
    "is_plausible_price",
    "resolve_url",
    "is_acceptable_image_url",
    "domain_label",
]

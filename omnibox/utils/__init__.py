"""Utilities package."""

from .logger import get_app_logger, setup_logger, init_app_logger
from .timestamps import normalize_timestamp, parse_timestamp, format_timestamp, utc_now

__all__ = [
    "get_app_logger",
    "setup_logger",
    "init_app_logger",
    "normalize_timestamp",
    "parse_timestamp",
    "format_timestamp",
    "utc_now",
]

"""Utility helpers for URL inspection and logging."""

from web_linkfinder.utils.url import (
    has_scheme,
    is_network_path,
    is_valid_host,
    same_origin,
    url_origin,
)
from web_linkfinder.utils.log import setup_logging, log

__all__ = [
    "has_scheme",
    "is_network_path",
    "is_valid_host",
    "same_origin",
    "url_origin",
    "setup_logging",
    "log",
]

"""Shared utilities"""

from .http_client import HttpClient, UpstreamFetchError
from .logging import get_logger

__all__ = [
    "HttpClient",
    "UpstreamFetchError",
    "get_logger",
]

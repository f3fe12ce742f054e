"""Shared module - 외부 API 호출과 로깅 등 서비스 공용 모듈"""

from shared.utils import HttpClient, UpstreamFetchError, get_logger

__all__ = [
    "HttpClient",
    "UpstreamFetchError",
    "get_logger",
]

"""외부 API HTTP 클라이언트 (공유)

날씨/영양 API 호출에 주입되는 비동기 HTTP 클라이언트.
요청마다 httpx.AsyncClient를 새로 열고 닫으므로 연결 상태를 공유하지 않는다.
"""

from typing import Any, Dict, Optional

import httpx


class UpstreamFetchError(Exception):
    """외부 API 호출 실패 (네트워크 오류, 타임아웃, 비정상 상태 코드, JSON 파싱 실패)"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class HttpClient:
    """비동기 JSON HTTP 클라이언트

    사용 예시:
        client = HttpClient(timeout=10.0)
        data = await client.get_json(url, params={"units": "metric"})

    테스트에서는 transport에 httpx.MockTransport를 넘겨 외부 호출을 대체한다.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            timeout: 요청 타임아웃 (초)
            transport: httpx 트랜스포트 (기본값: 실제 네트워크)
        """
        self.timeout = timeout
        self._transport = transport

    async def get_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """GET 요청 후 JSON 본문 반환"""
        return await self._request("GET", url, params=params)

    async def post_json(
        self,
        url: str,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """JSON 본문으로 POST 요청 후 JSON 본문 반환"""
        return await self._request("POST", url, json=payload)

    async def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamFetchError(
                f"{method} {url} 응답 오류: HTTP {e.response.status_code}", url=url
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise UpstreamFetchError(
                f"{method} {url} 요청 실패: {type(e).__name__}: {e}", url=url
            ) from e
        except ValueError as e:
            raise UpstreamFetchError(
                f"{method} {url} JSON 파싱 실패: {e}", url=url
            ) from e

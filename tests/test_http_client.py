"""공유 HTTP 클라이언트 테스트"""

import httpx
import pytest

from shared.utils import HttpClient, UpstreamFetchError


def _client(handler) -> HttpClient:
    return HttpClient(timeout=1.0, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_get_json_sends_params():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    data = await _client(handler).get_json("https://api.test/items", params={"units": "metric"})

    assert data == {"ok": True}
    assert seen[0].url.params["units"] == "metric"


@pytest.mark.asyncio
async def test_post_json_sends_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(201, content=request.content, headers={"content-type": "application/json"})

    data = await _client(handler).post_json("https://api.test/items", payload={"calories": 2000})

    assert data == {"calories": 2000}


@pytest.mark.asyncio
async def test_status_error_is_wrapped():
    client = _client(lambda request: httpx.Response(502))

    with pytest.raises(UpstreamFetchError) as exc_info:
        await client.get_json("https://api.test/items")

    assert "HTTP 502" in str(exc_info.value)
    assert exc_info.value.url == "https://api.test/items"
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_timeout_is_wrapped():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(UpstreamFetchError) as exc_info:
        await _client(handler).get_json("https://api.test/items")

    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


@pytest.mark.asyncio
async def test_invalid_json_is_wrapped():
    client = _client(lambda request: httpx.Response(200, text="{broken"))

    with pytest.raises(UpstreamFetchError):
        await client.post_json("https://api.test/items", payload={})

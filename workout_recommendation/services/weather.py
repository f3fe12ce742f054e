"""날씨 신호 조회 서비스

OpenWeatherMap 현재 날씨 (고정 좌표, metric)
실패 시 예외를 전파하지 않고 기본 신호를 반환한다.
"""

from typing import Any, Optional

from langsmith import traceable

from shared.utils import HttpClient, UpstreamFetchError, get_logger
from workout_recommendation.models.signals import WeatherSignal
from workout_recommendation.config import settings

logger = get_logger(__name__)


class WeatherSignalFetcher:
    """날씨 신호 조회

    사용 예시:
        fetcher = WeatherSignalFetcher()
        signal = await fetcher.fetch()
    """

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        api_key: Optional[str] = None,
        url: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ):
        """
        Args:
            http_client: HTTP 클라이언트 (테스트에서 MockTransport 주입)
            api_key: OpenWeatherMap API 키 (없으면 설정에서 로드)
            url: 날씨 엔드포인트
            latitude: 위도
            longitude: 경도
        """
        self._http = http_client or HttpClient(timeout=settings.http_timeout_seconds)
        self._api_key = api_key if api_key is not None else settings.openweather_api_key
        self._url = url or settings.weather_api_url
        self._latitude = latitude if latitude is not None else settings.weather_latitude
        self._longitude = longitude if longitude is not None else settings.weather_longitude

    @traceable(name="weather_signal_fetch")
    async def fetch(self) -> WeatherSignal:
        """
        현재 날씨 조회

        Returns:
            WeatherSignal (실패 시 {20.0, "Unknown", True})
        """
        params = {
            "lat": self._latitude,
            "lon": self._longitude,
            "appid": self._api_key,
            "units": "metric",
        }

        try:
            data = await self._http.get_json(self._url, params=params)
            return self._parse(data)
        except UpstreamFetchError as e:
            logger.warning(f"날씨 API 호출 실패. 기본 날씨 사용: {e}")
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"날씨 API 응답 형식 오류. 기본 날씨 사용: {type(e).__name__}: {e}")

        return WeatherSignal.default()

    def _parse(self, data: Any) -> WeatherSignal:
        """응답 파싱 (main.temp, weather[0].main)"""
        temperature = data["main"]["temp"]
        condition = data["weather"][0]["main"]
        if not isinstance(condition, str):
            raise TypeError(f"weather[0].main이 문자열이 아님: {condition!r}")
        return WeatherSignal.from_observation(
            temperature=float(temperature),
            condition=condition,
        )

"""테스트 공용 픽스처

외부 API(날씨/영양)는 httpx.MockTransport로 대체한다. 네트워크 호출 없음.
"""

import httpx
import pytest

from shared.utils import HttpClient
from workout_recommendation.pipeline import RecommendationPipeline
from workout_recommendation.services import NutritionSignalFetcher, WeatherSignalFetcher

from tests.fakes import FakeUpstream, NUTRITION_URL, WEATHER_API_KEY, WEATHER_URL


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def http_client(upstream: FakeUpstream) -> HttpClient:
    return HttpClient(timeout=1.0, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def weather_fetcher(http_client: HttpClient) -> WeatherSignalFetcher:
    return WeatherSignalFetcher(
        http_client=http_client,
        api_key=WEATHER_API_KEY,
        url=WEATHER_URL,
        latitude=53.3489,
        longitude=-6.2432,
    )


@pytest.fixture
def nutrition_fetcher(http_client: HttpClient) -> NutritionSignalFetcher:
    return NutritionSignalFetcher(http_client=http_client, base_url=NUTRITION_URL)


@pytest.fixture
def pipeline(
    weather_fetcher: WeatherSignalFetcher,
    nutrition_fetcher: NutritionSignalFetcher,
) -> RecommendationPipeline:
    return RecommendationPipeline(
        weather_fetcher=weather_fetcher,
        nutrition_fetcher=nutrition_fetcher,
    )

"""Workout Recommendation 설정

환경 변수:
- OPENWEATHER_API_KEY: OpenWeatherMap API 키
- NUTRITION_PLANNER_API_URL: Nutrition Planner API 기본 URL
- WEATHER_LATITUDE / WEATHER_LONGITUDE: 날씨 조회 좌표 (기본값: 더블린)
- HTTP_TIMEOUT_SECONDS: 외부 API 타임아웃 (기본값: 10초)

키/URL이 없으면 검증하지 않고, 호출이 실패해 기본 신호로 대체된다.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class WorkoutRecommendationSettings(BaseSettings):
    """운동 추천 설정"""

    # API Keys
    openweather_api_key: str = Field(default="", description="OpenWeatherMap API Key")

    # 날씨 API
    weather_api_url: str = Field(
        default="https://api.openweathermap.org/data/2.5/weather",
        description="현재 날씨 엔드포인트",
    )
    weather_latitude: float = Field(default=53.3489, description="위도")
    weather_longitude: float = Field(default=-6.2432, description="경도")

    # 영양 API
    nutrition_planner_api_url: str = Field(
        default="",
        description="Nutrition Planner API 기본 URL ({url}/meal-plans 호출)",
    )

    # HTTP
    http_timeout_seconds: float = Field(default=10.0, description="외부 API 타임아웃 (초)")

    # 로깅
    log_level: str = Field(default="INFO", description="로그 레벨")

    # 서버 설정
    host: str = Field(default="0.0.0.0", description="호스트")
    port: int = Field(default=8000, description="포트")

    class Config:
        env_prefix = ""
        env_file = ".env"
        extra = "ignore"


settings = WorkoutRecommendationSettings()

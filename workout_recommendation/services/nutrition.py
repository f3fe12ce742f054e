"""영양 신호 조회 서비스

Nutrition Planner API (POST {baseUrl}/meal-plans)
식단을 요청한 경우에만 호출되며, 실패 시 meals 없는 기본 신호를 반환한다.
"""

from typing import Optional, Union

from langsmith import traceable

from shared.utils import HttpClient, UpstreamFetchError, get_logger
from workout_recommendation.models.input import DietaryGoal
from workout_recommendation.models.signals import NutritionSignal
from workout_recommendation.config import settings

logger = get_logger(__name__)

# 식단 목표 → 영양 API 식단 선호 코드
DIETARY_PREFERENCE_MAP = {
    DietaryGoal.WEIGHT_LOSS.value: "balanced",
    DietaryGoal.MUSCLE_GAIN.value: "high_protein",
    DietaryGoal.MAINTENANCE.value: "balanced",
}
DEFAULT_DIETARY_PREFERENCE = "balanced"  # 폴백 코드


def map_dietary_preference(goal: str) -> str:
    """식단 목표를 선호 코드로 변환 (알 수 없는 목표는 balanced)"""
    return DIETARY_PREFERENCE_MAP.get(goal, DEFAULT_DIETARY_PREFERENCE)


class NutritionSignalFetcher:
    """영양 신호 조회

    사용 예시:
        fetcher = NutritionSignalFetcher()
        signal = await fetcher.fetch(2500, "muscle_gain")
    """

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        base_url: Optional[str] = None,
    ):
        """
        Args:
            http_client: HTTP 클라이언트 (테스트에서 MockTransport 주입)
            base_url: Nutrition Planner API 기본 URL (없으면 설정에서 로드)
        """
        self._http = http_client or HttpClient(timeout=settings.http_timeout_seconds)
        self._base_url = base_url if base_url is not None else settings.nutrition_planner_api_url

    @traceable(name="nutrition_signal_fetch")
    async def fetch(
        self,
        calories: Union[int, float],
        goal: str,
    ) -> NutritionSignal:
        """
        식단 조회

        Args:
            calories: 목표 칼로리
            goal: 식단 목표

        Returns:
            NutritionSignal (실패 시 meals 없는 기본 신호)
        """
        payload = {
            "calories": calories,
            "dietaryPreference": map_dietary_preference(goal),
        }

        try:
            data = await self._http.post_json(f"{self._base_url}/meal-plans", payload=payload)
            return NutritionSignal.model_validate(data)
        except UpstreamFetchError as e:
            logger.warning(f"영양 API 호출 실패. 기본 영양 비율 사용: {e}")
        except (TypeError, ValueError) as e:
            logger.warning(f"영양 API 응답 형식 오류. 기본 영양 비율 사용: {type(e).__name__}: {e}")

        return NutritionSignal.default(calories)

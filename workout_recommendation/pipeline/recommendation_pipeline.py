"""운동 추천 파이프라인

전체 흐름:
1. 요청 검증 (caloriesConsumed, dietaryGoal 필수)
2. 날씨 신호 + 영양 신호 동시 조회 (서로 독립)
3. 규칙 기반 운동 추천
4. 응답 조립 (식단은 meals가 있을 때만)
"""

import asyncio
from typing import Any, Dict, Mapping, Optional

from langsmith import traceable

from shared.utils import get_logger
from workout_recommendation.errors import (
    INTERNAL_ERROR_MESSAGE,
    MISSING_PARAMETERS_MESSAGE,
    MissingParameterError,
)
from workout_recommendation.models import (
    NutritionSignal,
    WorkoutRecommendationOutput,
    WorkoutRequest,
)
from workout_recommendation.services import (
    NutritionSignalFetcher,
    WeatherSignalFetcher,
    WorkoutRecommender,
)

logger = get_logger(__name__)

REQUIRED_FIELDS = ("caloriesConsumed", "dietaryGoal")


class RecommendationPipeline:
    """운동 추천 파이프라인

    사용 예시:
        pipeline = RecommendationPipeline()
        payload = await pipeline.run({"caloriesConsumed": 2000, "dietaryGoal": "weight_loss"})

    요청 간 공유 상태가 없으므로 인스턴스 하나를 여러 요청에서 써도 된다.
    """

    def __init__(
        self,
        weather_fetcher: Optional[WeatherSignalFetcher] = None,
        nutrition_fetcher: Optional[NutritionSignalFetcher] = None,
        recommender: Optional[WorkoutRecommender] = None,
    ):
        self.weather_fetcher = weather_fetcher or WeatherSignalFetcher()
        self.nutrition_fetcher = nutrition_fetcher or NutritionSignalFetcher()
        self.recommender = recommender or WorkoutRecommender()

    @traceable(name="workout_recommendation_pipeline")
    async def run(self, raw: Any) -> Dict[str, Any]:
        """
        운동 추천 실행

        Args:
            raw: 폼 클라이언트 요청 (camelCase)

        Returns:
            {"recommendations": [...], "mealPlan"?: {...}} 또는 {"error": str}
        """
        try:
            request = self.validate(raw)
            output = await self.recommend(request)
        except MissingParameterError as e:
            logger.info(f"요청 거부: {e}")
            return {"error": MISSING_PARAMETERS_MESSAGE}
        except Exception:
            logger.exception("운동 추천 처리 중 예기치 않은 오류")
            return {"error": INTERNAL_ERROR_MESSAGE}

        logger.info(
            f"운동 추천 완료: goal={request.dietary_goal}, "
            f"include_meal_plan={request.include_meal_plan}, "
            f"recommendations={len(output.recommendations)}, "
            f"meal_plan={'yes' if output.meal_plan is not None else 'no'}"
        )
        return output.to_payload()

    def validate(self, raw: Any) -> WorkoutRequest:
        """필수 필드 확인 후 요청 모델 생성 (그 외 범위 검증은 하지 않음)

        객체가 아닌 본문(목록, 문자열 등)은 필드가 하나도 없는 요청으로 본다.
        """
        if not isinstance(raw, Mapping):
            raw = {}
        missing = [name for name in REQUIRED_FIELDS if not raw.get(name)]
        if missing:
            raise MissingParameterError(missing)
        return WorkoutRequest.model_validate(raw)

    async def recommend(self, request: WorkoutRequest) -> WorkoutRecommendationOutput:
        """신호 조회 → 추천 → 출력 조립"""
        weather, nutrition = await asyncio.gather(
            self.weather_fetcher.fetch(),
            self._fetch_nutrition(request),
        )

        recommendations = self.recommender.derive(
            calories=request.calories_consumed,
            goal=request.dietary_goal,
            weather=weather,
            nutrition=nutrition,
        )

        return WorkoutRecommendationOutput(
            recommendations=recommendations,
            meal_plan=nutrition if nutrition.has_meal_plan else None,
        )

    async def _fetch_nutrition(self, request: WorkoutRequest) -> NutritionSignal:
        """식단 요청 시에만 영양 API 호출, 아니면 기본 신호"""
        if not request.include_meal_plan:
            return NutritionSignal.default(request.calories_consumed)
        return await self.nutrition_fetcher.fetch(
            request.calories_consumed,
            request.dietary_goal,
        )

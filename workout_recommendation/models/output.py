"""운동 추천 출력 모델"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict

from workout_recommendation.models.signals import NutritionSignal


class WorkoutType(str, Enum):
    """운동 종류"""

    CYCLING = "cycling"
    TREADMILL = "treadmill"
    STRENGTH_TRAINING = "strength_training"
    HIIT = "HIIT"


class Intensity(str, Enum):
    """운동 강도"""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class WorkoutRecommendation(BaseModel):
    """추천 운동 (생성 후 변경 불가)"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    workout_type: WorkoutType = Field(..., alias="workoutType", description="운동 종류")
    duration_minutes: int = Field(..., alias="durationMinutes", description="운동 시간 (분)")
    estimated_calories_burned: int = Field(
        ..., alias="estimatedCaloriesBurned", description="예상 소모 칼로리"
    )
    intensity: Intensity = Field(..., description="강도 (low/moderate/high)")
    description: str = Field(..., description="설명")


class WorkoutRecommendationOutput(BaseModel):
    """운동 추천 출력

    API 응답: POST /fitness/workout-recommendations
    """

    recommendations: List[WorkoutRecommendation] = Field(
        ..., description="추천 운동 (유산소 → 근력 → HIIT 순서)"
    )
    meal_plan: Optional[NutritionSignal] = Field(
        default=None, description="식단 (요청했고 영양 API가 반환한 경우에만)"
    )

    def to_payload(self) -> Dict[str, Any]:
        """JSON 직렬화 가능한 응답 dict (mealPlan 없으면 키 생략)"""
        payload: Dict[str, Any] = {
            "recommendations": [
                r.model_dump(by_alias=True, mode="json") for r in self.recommendations
            ],
        }
        if self.meal_plan is not None:
            payload["mealPlan"] = self.meal_plan.to_payload()
        return payload

"""운동 추천 입력 모델

폼 클라이언트에서 전달받는 요청
"""

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field, ConfigDict, field_validator


class DietaryGoal(str, Enum):
    """식단 목표"""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"


class WorkoutRequest(BaseModel):
    """운동 추천 요청

    API 엔드포인트: POST /fitness/workout-recommendations

    예시:
    {
        "caloriesConsumed": 2000,
        "dietaryGoal": "weight_loss",
        "includeMealPlan": false
    }

    목표 값 검증은 폼 계층의 책임이다. 알 수 없는 목표도 그대로 받아
    기본 규칙(보통 강도, HIIT 없음, balanced 식단)으로 처리한다.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    calories_consumed: Union[int, float] = Field(
        ..., alias="caloriesConsumed", description="섭취 칼로리 (kcal)"
    )
    dietary_goal: str = Field(
        ..., alias="dietaryGoal", description="식단 목표 (weight_loss/muscle_gain/maintenance)"
    )
    include_meal_plan: bool = Field(
        default=False, alias="includeMealPlan", description="식단 포함 여부"
    )

    @field_validator("include_meal_plan", mode="before")
    @classmethod
    def default_meal_plan_flag(cls, v):
        """null은 미요청으로 처리"""
        return False if v is None else v


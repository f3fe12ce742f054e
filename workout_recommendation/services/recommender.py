"""규칙 기반 운동 추천 서비스

순수 함수: 같은 입력이면 항상 같은 순서의 같은 결과.
외부 호출과 실패 경로가 없다.
"""

from typing import List, Union

from workout_recommendation.models.input import DietaryGoal
from workout_recommendation.models.output import (
    Intensity,
    WorkoutRecommendation,
    WorkoutType,
)
from workout_recommendation.models.signals import NutritionSignal, WeatherSignal

# 근력 운동 추가 기준 단백질 비율 (초과)
STRENGTH_PROTEIN_RATIO_THRESHOLD = 0.25


def _format_temperature(temperature: float) -> str:
    """기온 표기 (22.0 → "22", 22.5 → "22.5", -0.0 → "0", 자릿수는 자르지 않음)"""
    temperature = float(temperature)
    if temperature == 0:
        return "0"
    if temperature.is_integer():
        return str(int(temperature))
    return str(temperature)


class WorkoutRecommender:
    """규칙 기반 운동 추천

    추천 순서 (순서 유지 필수):
    1. 유산소 (항상 1개): 야외 가능 → 사이클링, 불가 → 트레드밀
    2. 근력 (조건부): 단백질 비율 > 0.25 또는 근육 증가 목표
    3. HIIT (조건부): 체중 감량 목표
    """

    def derive(
        self,
        calories: Union[int, float],
        goal: str,
        weather: WeatherSignal,
        nutrition: NutritionSignal,
    ) -> List[WorkoutRecommendation]:
        """
        운동 추천 생성

        Args:
            calories: 섭취 칼로리 (현재 규칙에서는 사용하지 않음)
            goal: 식단 목표
            weather: 날씨 신호
            nutrition: 영양 신호

        Returns:
            추천 운동 목록 (1~3개)
        """
        recommendations = [self._cardio(goal, weather)]

        if (
            nutrition.protein_ratio > STRENGTH_PROTEIN_RATIO_THRESHOLD
            or goal == DietaryGoal.MUSCLE_GAIN
        ):
            recommendations.append(self._strength())

        if goal == DietaryGoal.WEIGHT_LOSS:
            recommendations.append(self._hiit())

        return recommendations

    def _cardio(self, goal: str, weather: WeatherSignal) -> WorkoutRecommendation:
        """유산소 슬롯"""
        intensity = Intensity.HIGH if goal == DietaryGoal.WEIGHT_LOSS else Intensity.MODERATE

        if weather.is_outdoor_friendly:
            return WorkoutRecommendation(
                workout_type=WorkoutType.CYCLING,
                duration_minutes=45,
                estimated_calories_burned=500,
                intensity=intensity,
                description=(
                    "Outdoor cycling session. Current weather: "
                    f"{weather.condition}, {_format_temperature(weather.temperature)}°C."
                ),
            )

        return WorkoutRecommendation(
            workout_type=WorkoutType.TREADMILL,
            duration_minutes=30,
            estimated_calories_burned=350,
            intensity=intensity,
            description="Indoor treadmill run. Weather not ideal for outdoor activities.",
        )

    def _strength(self) -> WorkoutRecommendation:
        return WorkoutRecommendation(
            workout_type=WorkoutType.STRENGTH_TRAINING,
            duration_minutes=40,
            estimated_calories_burned=300,
            intensity=Intensity.MODERATE,
            description="Full-body strength workout focusing on major muscle groups.",
        )

    def _hiit(self) -> WorkoutRecommendation:
        return WorkoutRecommendation(
            workout_type=WorkoutType.HIIT,
            duration_minutes=20,
            estimated_calories_burned=300,
            intensity=Intensity.HIGH,
            description="High-intensity interval training to maximize calorie burn.",
        )

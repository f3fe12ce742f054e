"""Workout Recommendation Models"""

from .input import DietaryGoal, WorkoutRequest
from .signals import (
    OUTDOOR_FRIENDLY_CONDITIONS,
    WeatherSignal,
    NutritionSignal,
)
from .output import (
    WorkoutType,
    Intensity,
    WorkoutRecommendation,
    WorkoutRecommendationOutput,
)

__all__ = [
    "DietaryGoal",
    "WorkoutRequest",
    "OUTDOOR_FRIENDLY_CONDITIONS",
    "WeatherSignal",
    "NutritionSignal",
    "WorkoutType",
    "Intensity",
    "WorkoutRecommendation",
    "WorkoutRecommendationOutput",
]

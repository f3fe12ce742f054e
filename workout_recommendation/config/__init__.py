"""Workout Recommendation 설정"""

from .settings import WorkoutRecommendationSettings, settings

__all__ = [
    "WorkoutRecommendationSettings",
    "settings",
]

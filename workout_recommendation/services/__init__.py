"""Workout Recommendation Services"""

from .weather import WeatherSignalFetcher
from .nutrition import NutritionSignalFetcher, map_dietary_preference
from .recommender import WorkoutRecommender

__all__ = [
    "WeatherSignalFetcher",
    "NutritionSignalFetcher",
    "map_dietary_preference",
    "WorkoutRecommender",
]

"""Workout Recommendation Pipeline"""

from .recommendation_pipeline import RecommendationPipeline

__all__ = ["RecommendationPipeline"]

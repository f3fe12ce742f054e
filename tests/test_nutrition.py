"""영양 신호 조회 테스트"""

import logging

import httpx
import pytest

from workout_recommendation.models import NutritionSignal
from workout_recommendation.services import NutritionSignalFetcher, map_dietary_preference


def _meal_plan(total_calories: int = 2500, protein_ratio: float = 0.4) -> dict:
    return {
        "totalCalories": total_calories,
        "proteinRatio": protein_ratio,
        "carbRatio": 0.4,
        "fatRatio": round(0.6 - protein_ratio, 2),
        "meals": [
            {
                "meal": "Breakfast",
                "calories": 600,
                "ingredients": ["oats", "whey protein", "banana"],
            },
            {
                "meal": "Dinner",
                "calories": 900,
                "ingredients": ["chicken breast", "rice", "broccoli"],
                "prepMinutes": 25,
            },
        ],
        "planId": "mp-123",
    }


@pytest.mark.parametrize(
    "goal,expected",
    [
        ("weight_loss", "balanced"),
        ("muscle_gain", "high_protein"),
        ("maintenance", "balanced"),
        ("keto", "balanced"),
        ("", "balanced"),
    ],
)
def test_map_dietary_preference(goal, expected):
    assert map_dietary_preference(goal) == expected


@pytest.mark.asyncio
async def test_fetch_posts_calories_and_preference(upstream, nutrition_fetcher):
    upstream.nutrition = _meal_plan()

    await nutrition_fetcher.fetch(2500, "muscle_gain")

    assert len(upstream.nutrition_requests) == 1
    request = upstream.nutrition_requests[0]
    assert request.method == "POST"
    assert str(request.url) == "http://nutrition.test/meal-plans"
    assert upstream.nutrition_body() == {"calories": 2500, "dietaryPreference": "high_protein"}


@pytest.mark.asyncio
async def test_fetch_returns_provider_payload(upstream, nutrition_fetcher):
    upstream.nutrition = _meal_plan()

    signal = await nutrition_fetcher.fetch(2500, "muscle_gain")

    assert signal.total_calories == 2500
    assert signal.protein_ratio == 0.4
    assert signal.has_meal_plan
    assert [m["meal"] for m in signal.meals] == ["Breakfast", "Dinner"]
    assert signal.to_payload() == _meal_plan()


@pytest.mark.parametrize(
    "meals",
    [
        [{"name": "Snack", "kcal": 300, "items": [{"food": "yogurt", "grams": 150}]}],
        [{"meal": "Snack", "calories": "300"}],
        [{"meal": "Lunch", "calories": 700, "ingredients": [{"name": "rice", "grams": 200}]}],
        ["oatmeal", 42, None],
    ],
)
@pytest.mark.asyncio
async def test_meals_pass_through_unchanged(upstream, nutrition_fetcher, meals, caplog):
    """끼니 형태가 달라도 식단과 비율을 그대로 유지"""
    payload = _meal_plan(protein_ratio=0.35)
    payload["meals"] = meals
    upstream.nutrition = payload

    with caplog.at_level(logging.WARNING):
        signal = await nutrition_fetcher.fetch(2500, "muscle_gain")

    assert signal.protein_ratio == 0.35
    assert signal.has_meal_plan
    assert signal.to_payload()["meals"] == meals
    assert signal.to_payload() == payload
    assert "영양 API" not in caplog.text


@pytest.mark.asyncio
async def test_payload_without_meals_has_no_meal_plan(upstream, nutrition_fetcher):
    payload = _meal_plan()
    del payload["meals"]
    upstream.nutrition = payload

    signal = await nutrition_fetcher.fetch(2500, "weight_loss")

    assert signal.protein_ratio == 0.4
    assert not signal.has_meal_plan
    assert "meals" not in signal.to_payload()


@pytest.mark.asyncio
async def test_empty_meals_still_counts_as_meal_plan(upstream, nutrition_fetcher):
    payload = _meal_plan()
    payload["meals"] = []
    upstream.nutrition = payload

    signal = await nutrition_fetcher.fetch(2500, "muscle_gain")

    assert signal.has_meal_plan
    assert signal.to_payload()["meals"] == []


@pytest.mark.parametrize(
    "response",
    [
        None,
        httpx.Response(404, json={"message": "no such route"}),
        httpx.ConnectError("connection refused"),
        httpx.ReadTimeout("timed out"),
        httpx.Response(200, text="not json"),
    ],
)
@pytest.mark.asyncio
async def test_upstream_failure_returns_default(upstream, nutrition_fetcher, response, caplog):
    upstream.nutrition = response

    with caplog.at_level(logging.WARNING):
        signal = await nutrition_fetcher.fetch(2200, "weight_loss")

    assert signal == NutritionSignal.default(2200)
    assert signal.total_calories == 2200
    assert (signal.protein_ratio, signal.carb_ratio, signal.fat_ratio) == (0.3, 0.4, 0.3)
    assert not signal.has_meal_plan
    assert "영양 API 호출 실패" in caplog.text


@pytest.mark.parametrize(
    "payload",
    [
        {"totalCalories": 2000},
        {"totalCalories": 2000, "proteinRatio": "lots", "carbRatio": 0.4, "fatRatio": 0.3},
        {
            "totalCalories": 2000,
            "proteinRatio": 0.3,
            "carbRatio": 0.4,
            "fatRatio": 0.3,
            "meals": "breakfast",
        },
        ["unexpected"],
    ],
)
@pytest.mark.asyncio
async def test_malformed_payload_returns_default(upstream, nutrition_fetcher, payload, caplog):
    upstream.nutrition = payload

    with caplog.at_level(logging.WARNING):
        signal = await nutrition_fetcher.fetch(2000, "maintenance")

    assert signal == NutritionSignal.default(2000)
    assert "영양 API 응답 형식 오류" in caplog.text


@pytest.mark.asyncio
async def test_missing_base_url_returns_default(http_client):
    fetcher = NutritionSignalFetcher(http_client=http_client, base_url="")

    signal = await fetcher.fetch(1900, "maintenance")

    assert signal == NutritionSignal.default(1900)


def test_default_signal_payload_has_no_meals():
    assert NutritionSignal.default(1800).to_payload() == {
        "totalCalories": 1800,
        "proteinRatio": 0.3,
        "carbRatio": 0.4,
        "fatRatio": 0.3,
    }

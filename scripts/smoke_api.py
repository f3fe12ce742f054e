"""배포 API 스모크 테스트 스크립트

사용법:
    python scripts/smoke_api.py <BASE_URL>

예시:
    python scripts/smoke_api.py http://localhost:8000
"""

import requests
import json
import sys
from typing import Dict, Any

RECOMMEND_PATH = "/fitness/workout-recommendations"


def check_health(base_url: str) -> Dict[str, Any]:
    """헬스 체크"""
    url = f"{base_url}/health"

    try:
        response = requests.get(url, timeout=5)
        return {
            "status_code": response.status_code,
            "success": response.status_code == 200,
            "response": response.json() if response.status_code == 200 else response.text,
            "error": None,
        }
    except requests.RequestException as e:
        return {
            "status_code": None,
            "success": False,
            "response": None,
            "error": str(e),
        }


def check_recommendation(base_url: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    """운동 추천 요청"""
    url = f"{base_url}{RECOMMEND_PATH}"

    try:
        response = requests.post(url, json=payload, timeout=30)
        body = response.json()
        success = (
            response.status_code == 200
            and isinstance(body.get("recommendations"), list)
            and len(body["recommendations"]) > 0
        )
        return {
            "status_code": response.status_code,
            "success": success,
            "response": body,
            "error": None,
            "payload": payload,
        }
    except (requests.RequestException, ValueError) as e:
        return {
            "status_code": None,
            "success": False,
            "response": None,
            "error": str(e),
            "payload": payload,
        }


def check_missing_parameters(base_url: str) -> Dict[str, Any]:
    """필수 파라미터 누락 시 400 + 오류 메시지 확인"""
    url = f"{base_url}{RECOMMEND_PATH}"

    try:
        response = requests.post(url, json={}, timeout=10)
        body = response.json()
        return {
            "status_code": response.status_code,
            "success": response.status_code == 400 and body == {"error": "Missing required parameters"},
            "response": body,
            "error": None,
        }
    except (requests.RequestException, ValueError) as e:
        return {
            "status_code": None,
            "success": False,
            "response": None,
            "error": str(e),
        }


def _print_result(title: str, result: Dict[str, Any]):
    print(f"\n{title}")
    print("-" * 70)
    if "payload" in result:
        print("📝 요청 페이로드:")
        print(json.dumps(result["payload"], indent=2, ensure_ascii=False))
    print("\n📥 응답:")
    print(json.dumps({k: v for k, v in result.items() if k != "payload"}, indent=2, ensure_ascii=False))


def main():
    if len(sys.argv) < 2:
        print("사용법: python scripts/smoke_api.py <BASE_URL>")
        print("예시: python scripts/smoke_api.py http://localhost:8000")
        sys.exit(1)

    base_url = sys.argv[1].rstrip("/")

    print("=" * 70)
    print("Workout Recommendation API 스모크 테스트")
    print("=" * 70)
    print(f"\n대상 URL: {base_url}\n")

    health_result = check_health(base_url)
    _print_result("1. 헬스 체크", health_result)

    if not health_result["success"]:
        print("\n⚠️  헬스 체크 실패. URL을 확인하세요.")
        sys.exit(1)

    basic_result = check_recommendation(
        base_url,
        {"caloriesConsumed": 2000, "dietaryGoal": "weight_loss", "includeMealPlan": False},
    )
    _print_result("2. 운동 추천 (식단 없음)", basic_result)

    meal_result = check_recommendation(
        base_url,
        {"caloriesConsumed": 2500, "dietaryGoal": "muscle_gain", "includeMealPlan": True},
    )
    _print_result("3. 운동 추천 (식단 포함)", meal_result)
    if meal_result["success"] and "mealPlan" not in meal_result["response"]:
        print("\nℹ️  mealPlan 없음: 영양 API 실패로 기본 영양 비율이 사용되었습니다.")

    missing_result = check_missing_parameters(base_url)
    _print_result("4. 필수 파라미터 누락", missing_result)

    print("\n\n" + "=" * 70)
    print("테스트 요약")
    print("=" * 70)
    print(f"헬스 체크:        {'✅ 성공' if health_result['success'] else '❌ 실패'}")
    print(f"추천 (식단 없음): {'✅ 성공' if basic_result['success'] else '❌ 실패'}")
    print(f"추천 (식단 포함): {'✅ 성공' if meal_result['success'] else '❌ 실패'}")
    print(f"파라미터 누락:    {'✅ 성공' if missing_result['success'] else '❌ 실패'}")

    if not all(r["success"] for r in (basic_result, meal_result, missing_result)):
        sys.exit(1)


if __name__ == "__main__":
    main()

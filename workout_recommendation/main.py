"""Workout Recommendation FastAPI 서버

사용법:
    PYTHONPATH=. python -m workout_recommendation.main

포트: 8000 (기본)
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import os
from typing import Any, Dict

from dotenv import load_dotenv
load_dotenv(override=True)

# LangSmith 프로젝트 분리
os.environ["LANGSMITH_PROJECT"] = "workout-recommendation"

from fastapi import FastAPI, Body, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shared.utils import get_logger
from workout_recommendation.config import settings
from workout_recommendation.errors import MISSING_PARAMETERS_MESSAGE
from workout_recommendation.pipeline import RecommendationPipeline

logger = get_logger(__name__, settings.log_level)

# 추천 파이프라인 (싱글톤, 요청 간 상태 없음)
recommendation_pipeline: RecommendationPipeline = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 라이프사이클 관리"""
    global recommendation_pipeline
    logger.info("Workout Recommendation Service 시작 중...")
    recommendation_pipeline = RecommendationPipeline()
    logger.info("Workout Recommendation Service 준비 완료")
    yield
    logger.info("Workout Recommendation Service 종료")


app = FastAPI(
    title="Workout Recommendation API",
    description="섭취 칼로리 + 식단 목표 + 날씨 기반 운동 추천 API",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_pipeline() -> RecommendationPipeline:
    """요청 처리용 파이프라인 (테스트에서 dependency_overrides로 교체)"""
    global recommendation_pipeline
    if recommendation_pipeline is None:
        recommendation_pipeline = RecommendationPipeline()
    return recommendation_pipeline


def _status_code_for(payload: Dict[str, Any]) -> int:
    """응답 형태로 상태 코드 결정"""
    if "error" not in payload:
        return 200
    if payload["error"] == MISSING_PARAMETERS_MESSAGE:
        return 400
    return 500


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """JSON으로 읽을 수 없는 본문 → 필수 파라미터 누락과 같은 오류 형태"""
    logger.info(f"요청 본문 파싱 실패: {exc.errors()}")
    return JSONResponse(status_code=400, content={"error": MISSING_PARAMETERS_MESSAGE})


@app.get("/health")
async def health_check():
    """헬스 체크"""
    return {
        "status": "healthy",
        "service": "workout-recommendation",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/fitness/workout-recommendations")
async def workout_recommendations(
    request: Any = Body(
        None,
        examples=[
            {
                "caloriesConsumed": 2000,
                "dietaryGoal": "weight_loss",
                "includeMealPlan": False,
            }
        ],
    ),
    pipeline: RecommendationPipeline = Depends(get_pipeline),
):
    """
    운동 추천 API

    입력:
    - caloriesConsumed: 섭취 칼로리 (필수)
    - dietaryGoal: weight_loss / muscle_gain / maintenance (필수)
    - includeMealPlan: 식단 포함 여부 (기본값: false)

    출력:
    - recommendations: 추천 운동 목록
    - mealPlan: 식단 (요청했고 영양 API가 성공한 경우에만)
    - error: 검증/내부 오류 메시지
    """
    payload = await pipeline.run(request)
    return JSONResponse(status_code=_status_code_for(payload), content=payload)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Workout Recommendation Service 시작: http://{settings.host}:{settings.port}")
    uvicorn.run(
        "workout_recommendation.main:app",
        host=settings.host,
        port=settings.port,
        reload=True,
    )

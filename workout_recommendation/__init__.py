"""Workout Recommendation - 운동 추천 서비스

사용 빈도: 요청마다 (상태 없음)
외부 API: OpenWeatherMap (날씨), Nutrition Planner (식단)

주요 기능:
- 날씨 신호 조회 (실패 시 기본값)
- 영양 신호 조회 (식단 요청 시에만, 실패 시 기본값)
- 규칙 기반 운동 추천 (유산소 → 근력 → HIIT)
- 식단 포함 응답 조립
"""

__version__ = "1.0.0"

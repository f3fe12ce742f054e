"""날씨/영양 신호 모델

신호는 항상 존재한다. 외부 API가 실패하면 필드 일부가 아니라
신호 전체가 기본값으로 대체된다.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict


# 야외 운동 가능 날씨 (정확히 일치, 대소문자 구분)
OUTDOOR_FRIENDLY_CONDITIONS = frozenset({"Clear", "Clouds", "Few clouds"})


class WeatherSignal(BaseModel):
    """날씨 신호"""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    temperature: float = Field(..., description="기온 (°C)")
    condition: str = Field(..., description="날씨 상태 (OpenWeatherMap weather[0].main)")
    is_outdoor_friendly: bool = Field(
        ..., alias="isOutdoorFriendly", description="야외 운동 적합 여부"
    )

    @classmethod
    def from_observation(cls, temperature: float, condition: str) -> "WeatherSignal":
        """관측값으로 신호 생성 (야외 적합 여부는 허용 목록으로 판정)"""
        return cls(
            temperature=temperature,
            condition=condition,
            is_outdoor_friendly=condition in OUTDOOR_FRIENDLY_CONDITIONS,
        )

    @classmethod
    def default(cls) -> "WeatherSignal":
        """날씨 API 실패 시 기본 신호"""
        return cls(temperature=20.0, condition="Unknown", is_outdoor_friendly=True)


class NutritionSignal(BaseModel):
    """영양 신호

    meals 필드가 있으면 (빈 목록 포함) 식단을 응답에 포함한다.
    영양 API가 보낸 추가 필드는 그대로 보존한다.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    total_calories: Union[int, float] = Field(
        ..., alias="totalCalories", description="총 칼로리"
    )
    protein_ratio: float = Field(..., alias="proteinRatio", description="단백질 비율")
    carb_ratio: float = Field(..., alias="carbRatio", description="탄수화물 비율")
    fat_ratio: float = Field(..., alias="fatRatio", description="지방 비율")
    # 끼니 형태는 검사하지 않고 영양 API가 보낸 그대로 전달
    meals: Optional[List[Any]] = Field(default=None, description="식단 (선택)")

    @property
    def has_meal_plan(self) -> bool:
        """식단 포함 여부"""
        return self.meals is not None

    @classmethod
    def default(cls, calories: Union[int, float]) -> "NutritionSignal":
        """식단 미요청 또는 영양 API 실패 시 기본 신호"""
        return cls(
            total_calories=calories,
            protein_ratio=0.3,
            carb_ratio=0.4,
            fat_ratio=0.3,
        )

    def to_payload(self) -> Dict[str, Any]:
        """응답용 dict (camelCase, meals 없으면 키 생략)"""
        payload = self.model_dump(by_alias=True, mode="json")
        if self.meals is None:
            payload.pop("meals", None)
        return payload

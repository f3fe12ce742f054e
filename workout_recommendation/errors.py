"""운동 추천 오류 정의"""

MISSING_PARAMETERS_MESSAGE = "Missing required parameters"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class MissingParameterError(ValueError):
    """필수 요청 필드 (caloriesConsumed, dietaryGoal) 누락"""

    def __init__(self, missing: list):
        super().__init__(f"필수 파라미터 누락: {', '.join(missing)}")
        self.missing = missing

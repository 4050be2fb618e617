"""
Errors raised by the meal services.

The controller catches MealServiceError and shows a single error panel,
so the subclasses only matter for logging and tests.
"""


class MealServiceError(Exception):
    """Base class for meal lookup failures."""


class MealNetworkError(MealServiceError):
    """The HTTP request failed or returned a non-success status."""

    def __init__(self, message: str = "네트워크 오류가 발생했습니다."):
        super().__init__(message)


class MealParseError(MealServiceError):
    """The response body was not well-formed XML."""

    def __init__(self, message: str = "급식 정보를 해석할 수 없습니다."):
        super().__init__(message)


class MealNotFoundError(MealServiceError):
    """NEIS returned a result code other than INFO-000."""

    def __init__(self, code: str, message: str = "급식 정보를 찾을 수 없습니다."):
        self.code = code
        super().__init__(f"{message} ({code})")

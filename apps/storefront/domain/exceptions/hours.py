"""Hours 도메인 예외."""

from storefront.domain.exceptions.base import DomainError


class InvalidTimeError(DomainError):
    """시각을 해석할 수 없음."""

    code = "INVALID_TIME"
    localized = {"es-PR": "Tiempo inválido."}

    def __init__(self) -> None:
        super().__init__("Invalid time.")


class InvalidTimeRangeError(DomainError):
    """시작 시각이 종료 시각보다 늦거나 같음."""

    code = "INVALID_TIME_RANGE"
    localized = {"es-PR": "Rango de tiempo no válido."}

    def __init__(self) -> None:
        super().__init__("Invalid time range.")


class InvalidDayOfWeekError(DomainError):
    """요일 값이 0..6 범위를 벗어남."""

    code = "INVALID_DAY_OF_WEEK"

    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid day of week '{value}'. Expected 0 (Sunday) to 6 (Saturday).")


class DuplicateDayOfWeekError(DomainError):
    """한 요청에 같은 요일이 두 번 이상 포함됨."""

    code = "DUPLICATE_DAY_OF_WEEK"

    def __init__(self, value: int) -> None:
        super().__init__(f"Day of week '{value}' appears more than once.")

"""Review 도메인 예외."""

from storefront.domain.exceptions.base import DomainError


class InvalidRatingError(DomainError):
    """평점이 0..5 범위를 벗어남."""

    code = "INVALID_RATING"

    def __init__(self, value: float) -> None:
        super().__init__(f"Invalid rating '{value}'. Expected a value between 0 and 5.")

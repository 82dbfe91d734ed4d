"""리뷰 관련 예외."""

from storefront.application.common.exceptions.base import ApplicationError
from storefront.domain.enums import ErrorKind


class ReviewNotFoundError(ApplicationError):
    """리뷰를 찾을 수 없음."""

    kind = ErrorKind.NOT_FOUND
    code = "REVIEW_NOT_FOUND"
    localized = {"es-PR": "Revisión no encontrada."}

    def __init__(self) -> None:
        super().__init__("Review not found.")


class ReviewSpamError(ApplicationError):
    """리뷰 작성 간격 제한 위반."""

    kind = ErrorKind.POLICY_DENIED
    code = "REVIEW_SPAM"
    status_code = 400

    def __init__(self, interval_days: int = 30) -> None:
        super().__init__(f"You can only leave 1 review per listing every {interval_days} days.")
        self.interval_days = interval_days
        self.localized = {
            "es-PR": f"Solo puedes dejar 1 opinión por listado cada {interval_days} días."
        }


class ReviewerRequiredError(ApplicationError):
    """리뷰 작성자를 알 수 없음 (본문 user_id와 X-User-Id 모두 없음)."""

    code = "REVIEWER_REQUIRED"

    def __init__(self) -> None:
        super().__init__("User id is required to leave a review.")


class ReporterRequiredError(ApplicationError):
    """신고자를 알 수 없음 (X-User-Id 없음)."""

    code = "REPORTER_REQUIRED"

    def __init__(self) -> None:
        super().__init__("User id is required to report a review.")

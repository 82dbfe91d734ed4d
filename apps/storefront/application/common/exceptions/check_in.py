"""체크인 관련 예외."""

from storefront.application.common.exceptions.base import ApplicationError
from storefront.domain.enums import ErrorKind


class MobileNumberRequiredError(ApplicationError):
    """휴대폰 번호 누락."""

    code = "MOBILE_NUMBER_REQUIRED"
    localized = {"es-PR": "Se requiere número de móvil."}

    def __init__(self) -> None:
        super().__init__("Mobile number is required.")


class CheckInRestrictedError(ApplicationError):
    """같은 현지 날짜에 이미 체크인함."""

    kind = ErrorKind.CONFLICT
    code = "CHECKIN_RESTRICTED"
    localized = {"es-PR": "Ya te has registrado hoy."}

    def __init__(self) -> None:
        super().__init__("You have already checked in today.")


class CheckInNotFoundError(ApplicationError):
    """체크인 기록 없음."""

    kind = ErrorKind.NOT_FOUND
    code = "CHECKIN_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("Check-in not found.")

"""위치 관리 관련 예외."""

from storefront.application.common.exceptions.base import ApplicationError
from storefront.domain.enums import ErrorKind


class OrganizationNotFoundError(ApplicationError):
    """조직을 찾을 수 없음."""

    kind = ErrorKind.NOT_FOUND
    code = "ORGANIZATION_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("Organization not found.")


class OffHoursDisabledError(ApplicationError):
    """조직이 영업시간 외 운영을 허용하지 않음."""

    kind = ErrorKind.POLICY_DENIED
    code = "ORGANIZATION_OFF_HOURS_DISABLED"
    status_code = 400

    def __init__(self) -> None:
        super().__init__("Off hours are disabled for this organization.")


class LocationNotAssignedError(ApplicationError):
    """요청 사용자에게 할당되지 않은 위치."""

    kind = ErrorKind.POLICY_DENIED
    code = "LOCATION_NOT_ASSIGNED"

    def __init__(self) -> None:
        super().__init__("You are not assigned to this location.")


class AdminRightsRequiredError(ApplicationError):
    """관리자 권한이 필요한 옵션."""

    kind = ErrorKind.POLICY_DENIED
    code = "ADMIN_RIGHTS_REQUIRED"

    def __init__(self) -> None:
        super().__init__("Admin rights are required for this action.")


class TimezoneLookupError(ApplicationError):
    """외부 타임존 조회 실패."""

    kind = ErrorKind.INTERNAL
    code = "TIMEZONE_LOOKUP_FAILED"

    def __init__(self) -> None:
        super().__init__("Failed to get location timezone from Google. See logs.")


class NoChangesProvidedError(ApplicationError):
    """변경사항이 없을 때 발생하는 예외."""

    code = "NO_CHANGES_PROVIDED"

    def __init__(self) -> None:
        super().__init__("No changes provided")

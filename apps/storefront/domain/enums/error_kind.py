"""Error Kind Enum."""

from enum import Enum


class ErrorKind(str, Enum):
    """예외 분류.

    경계 계층(HTTP)이 상태 코드를 다시 유추하지 않도록
    모든 도메인/애플리케이션 예외가 하나의 kind를 가집니다.
    """

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    POLICY_DENIED = "policy_denied"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.POLICY_DENIED: 403,
    ErrorKind.INTERNAL: 500,
}

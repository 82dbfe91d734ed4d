"""도메인 예외 베이스 클래스."""

from __future__ import annotations

from typing import ClassVar

from storefront.domain.enums import ErrorKind


class DomainError(Exception):
    """모든 도메인 예외의 베이스 클래스.

    Attributes:
        kind: 예외 분류 (HTTP 상태 코드 매핑 기준)
        code: 기계 판독용 안정 코드
        status_code: kind 기본값 대신 사용할 상태 코드 (선택)
        localized: 언어 태그별 메시지 (예: {"es-PR": "..."})
    """

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION
    code: ClassVar[str] = "DOMAIN_ERROR"
    status_code: ClassVar[int | None] = None
    localized: dict[str, str] = {}

    def __init__(self, message: str = "Domain error occurred") -> None:
        self.message = message
        super().__init__(message)

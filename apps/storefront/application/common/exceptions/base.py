"""애플리케이션 예외 베이스 클래스."""

from __future__ import annotations

from typing import ClassVar

from storefront.domain.enums import ErrorKind


class ApplicationError(Exception):
    """모든 애플리케이션 예외의 베이스 클래스."""

    kind: ClassVar[ErrorKind] = ErrorKind.VALIDATION
    code: ClassVar[str] = "APPLICATION_ERROR"
    status_code: ClassVar[int | None] = None
    localized: dict[str, str] = {}

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)

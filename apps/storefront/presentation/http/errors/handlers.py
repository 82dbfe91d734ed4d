"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
Accept-Language가 es로 시작하면 es-PR 메시지를 우선 사용합니다.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from storefront.application.common.exceptions.base import ApplicationError
from storefront.domain.enums import ErrorKind
from storefront.domain.exceptions.base import DomainError

logger = logging.getLogger(__name__)

SPANISH_LOCALE = "es-PR"


def prefers_spanish(accept_language: str | None) -> bool:
    """Accept-Language 헤더에서 첫 번째로 유효한 언어가 스페인어인지 판단합니다."""
    if not accept_language:
        return False
    for part in accept_language.split(","):
        tag = part.split(";")[0].strip().lower()
        if not tag or tag == "*":
            continue
        return tag == "es" or tag.startswith("es-")
    return False


def localized_message(request: Request, exc: DomainError | ApplicationError) -> str:
    if prefers_spanish(request.headers.get("accept-language")):
        return exc.localized.get(SPANISH_LOCALE, exc.message)
    return exc.message


def _error_response(request: Request, exc: DomainError | ApplicationError) -> JSONResponse:
    status_code = exc.status_code or exc.kind.status_code
    if exc.kind == ErrorKind.INTERNAL:
        logger.error(
            "Internal application error",
            extra={"code": exc.code, "path": request.url.path},
        )
    return JSONResponse(
        status_code=status_code,
        content={"detail": localized_message(request, exc), "code": exc.code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(request, exc)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(request, exc)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.exception("Database error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error", "code": "DATABASE_ERROR"},
        )

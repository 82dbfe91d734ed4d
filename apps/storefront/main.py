"""Storefront API - FastAPI application entry point.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Google Time Zone API 호출)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront.infrastructure.observability import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)
from storefront.presentation.http.controllers import (
    check_in_router,
    health_router,
    hours_router,
    listing_router,
    location_router,
    product_router,
    review_router,
)
from storefront.presentation.http.errors import register_exception_handlers
from storefront.setup.config import get_settings
from storefront.setup.dependencies import close_timezone_client
from storefront.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
    )
    logger.info("Starting %s", settings.service_name)

    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            endpoint=settings.otel_exporter_otlp_endpoint,
            sampling_rate=settings.otel_sampling_rate,
            environment=settings.environment,
            service_version=settings.service_version,
        )
        instrument_httpx()

    yield

    logger.info("Shutting down %s", settings.service_name)
    await close_timezone_client()
    if settings.otel_enabled:
        shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Storefront API",
        description="Store locations, opening hours, reviews and mobile check-in",
        version=settings.service_version,
        docs_url="/api/v1/locations/docs",
        openapi_url="/api/v1/locations/openapi.json",
        redoc_url="/api/v1/locations/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # 정적 경로를 가진 라우터를 먼저 등록
    app.include_router(health_router)
    app.include_router(check_in_router, prefix="/api/v1")
    app.include_router(listing_router, prefix="/api/v1")
    app.include_router(product_router, prefix="/api/v1")
    app.include_router(location_router, prefix="/api/v1")
    app.include_router(hours_router, prefix="/api/v1")
    app.include_router(review_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "storefront.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )

"""OpenTelemetry Tracing - Storefront Service."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None

# 헬스체크와 문서 경로는 span을 만들지 않음
EXCLUDED_URLS = "health,ping,api/v1/locations/docs,api/v1/locations/openapi.json"


def setup_tracing(
    service_name: str,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "development",
    service_version: str = "1.0.0",
) -> None:
    """전역 TracerProvider를 설정합니다. 두 번째 호출부터는 무시합니다.

    Args:
        service_name: resource의 service.name
        endpoint: OTLP gRPC 수집기 주소
        sampling_rate: trace ID 기반 샘플링 비율 (0.0 ~ 1.0)
    """
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        logger.debug("Tracer provider already configured")
        return

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
    exporter = OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": service_name, "endpoint": endpoint, "sampling_rate": sampling_rate},
    )


def instrument_fastapi(app: FastAPI) -> None:
    """요청마다 서버 span을 만듭니다."""
    FastAPIInstrumentor.instrument_app(app, excluded_urls=EXCLUDED_URLS)
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx() -> None:
    """Google Time Zone 호출에 클라이언트 span을 붙입니다."""
    HTTPXClientInstrumentor().instrument()
    logger.info("HTTPX instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is None:
        return
    _tracer_provider.shutdown()
    _tracer_provider = None

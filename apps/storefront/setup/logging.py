"""Logging configuration.

텍스트 또는 ECS(Elastic Common Schema) JSON 형식으로 stdout에 기록합니다.
`extra`로 넘긴 필드는 labels 아래에 기록되며, 휴대폰 번호와 API 키는 마스킹합니다.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace

ECS_VERSION = "8.11.0"

# LogRecord 기본 속성 (extra 필드 판별용)
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}

# 휴대폰 번호: 끝 4자리만 남김
PHONE_FIELDS = frozenset({"mobile_number", "phone_number"})
# 자격 증명: 전체 가림
SECRET_FIELD_PATTERNS = ("api_key", "token", "secret", "password", "authorization")

REDACTED = "***REDACTED***"
_NON_DIGIT = re.compile(r"\D")


def mask_phone(value: Any) -> str:
    """`3105550100` → `******0100`."""
    digits = _NON_DIGIT.sub("", str(value or ""))
    if len(digits) <= 4:
        return REDACTED
    return "*" * (len(digits) - 4) + digits[-4:]


def _mask_field(key: str, value: Any) -> Any:
    key_lower = key.lower()
    if key_lower in PHONE_FIELDS:
        return mask_phone(value)
    if any(pattern in key_lower for pattern in SECRET_FIELD_PATTERNS):
        return REDACTED
    if isinstance(value, dict):
        return mask_sensitive_data(value)
    return value


def mask_sensitive_data(data: dict[str, Any]) -> dict[str, Any]:
    """민감한 키의 값을 마스킹합니다 (중첩 dict 포함)."""
    return {key: _mask_field(key, value) for key, value in data.items()}


class ECSJsonFormatter(logging.Formatter):
    """ECS 기반 JSON 포매터.

    현재 span이 있으면 trace.id / span.id를 함께 기록합니다.
    """

    def __init__(
        self,
        service_name: str,
        service_version: str = "1.0.0",
        environment: str = "development",
    ) -> None:
        super().__init__()
        self._service = {
            "service.name": service_name,
            "service.version": service_version,
            "service.environment": environment,
        }

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            "@timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(
                timespec="milliseconds"
            ),
            "log.level": record.levelname.lower(),
            "log.logger": record.name,
            "message": record.getMessage(),
            "ecs.version": ECS_VERSION,
            **self._service,
        }

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            document["trace.id"] = format(span_context.trace_id, "032x")
            document["span.id"] = format(span_context.span_id, "016x")

        if record.exc_info and record.exc_info[0] is not None:
            document["error.type"] = record.exc_info[0].__name__
            document["error.message"] = str(record.exc_info[1])
            document["error.stack_trace"] = self.formatException(record.exc_info)

        labels = {
            key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        }
        if labels:
            document["labels"] = mask_sensitive_data(labels)

        return json.dumps(document, ensure_ascii=False, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = False,
    service_name: str = "storefront-api",
    service_version: str = "1.0.0",
    environment: str = "development",
) -> None:
    """루트 로거를 설정합니다. 여러 번 호출해도 핸들러는 하나입니다."""
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        handler.setFormatter(ECSJsonFormatter(service_name, service_version, environment))
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)-8s [%(name)s] %(message)s")
        )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    # 쿼리/HTTP 클라이언트 로그는 WARNING 이상만
    for noisy in ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

"""로깅 설정 테스트."""

from __future__ import annotations

import json
import logging

from storefront.setup.logging import ECSJsonFormatter, mask_phone, mask_sensitive_data


def test_mask_phone_keeps_last_four_digits() -> None:
    assert mask_phone("(310) 555-0100") == "******0100"
    assert mask_phone("0100") == "***REDACTED***"
    assert mask_phone(None) == "***REDACTED***"


def test_mask_sensitive_data() -> None:
    masked = mask_sensitive_data(
        {
            "mobile_number": "3105550100",
            "google_maps_api_key": "AIzaSyExample",
            "location_id": 1,
            "nested": {"phone_number": "3105550199"},
        }
    )

    assert masked == {
        "mobile_number": "******0100",
        "google_maps_api_key": "***REDACTED***",
        "location_id": 1,
        "nested": {"phone_number": "******0199"},
    }


def test_ecs_formatter_writes_masked_labels() -> None:
    formatter = ECSJsonFormatter(service_name="storefront-api", environment="test")
    record = logging.LogRecord(
        "storefront.check_in", logging.INFO, __file__, 1, "Mobile check-in recorded", None, None
    )
    record.location_id = 1
    record.mobile_number = "3105550100"

    document = json.loads(formatter.format(record))

    assert document["message"] == "Mobile check-in recorded"
    assert document["log.level"] == "info"
    assert document["service.name"] == "storefront-api"
    assert document["service.environment"] == "test"
    assert document["labels"] == {"location_id": 1, "mobile_number": "******0100"}
    assert "trace.id" not in document

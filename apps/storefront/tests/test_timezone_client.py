"""GoogleTimezoneHttpClient 테스트 (httpx MockTransport)."""

from __future__ import annotations

import httpx
import pytest

from storefront.application.common.exceptions import TimezoneLookupError
from storefront.domain.value_objects import Coordinates
from storefront.infrastructure.integrations.google import GoogleTimezoneHttpClient
from storefront.tests.conftest import LA_TIMEZONE, ORIGIN_LAT, ORIGIN_LONG

pytestmark = pytest.mark.asyncio

ORIGIN = Coordinates(longitude=ORIGIN_LONG, latitude=ORIGIN_LAT)


def _client_with(handler) -> GoogleTimezoneHttpClient:
    client = GoogleTimezoneHttpClient(api_key="test-key")
    client._client = httpx.AsyncClient(
        base_url=GoogleTimezoneHttpClient.BASE_URL,
        transport=httpx.MockTransport(handler),
    )
    return client


async def test_lookup_returns_time_zone_id() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"status": "OK", "timeZoneId": LA_TIMEZONE})

    client = _client_with(handler)

    assert await client.lookup(ORIGIN) == LA_TIMEZONE
    assert seen[0].url.path == "/maps/api/timezone/json"
    assert seen[0].url.params["location"] == f"{ORIGIN_LAT},{ORIGIN_LONG}"
    assert seen[0].url.params["key"] == "test-key"
    await client.close()


async def test_non_ok_status_raises() -> None:
    client = _client_with(
        lambda request: httpx.Response(
            200, json={"status": "REQUEST_DENIED", "errorMessage": "bad key"}
        )
    )

    with pytest.raises(TimezoneLookupError):
        await client.lookup(ORIGIN)
    await client.close()


async def test_http_error_raises() -> None:
    client = _client_with(lambda request: httpx.Response(503))

    with pytest.raises(TimezoneLookupError):
        await client.lookup(ORIGIN)
    await client.close()

"""Google Time Zone HTTP 클라이언트.

- 시간대 조회: GET /maps/api/timezone/json
- 인증: key 쿼리 파라미터
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

import httpx

from storefront.application.common.exceptions import TimezoneLookupError
from storefront.application.management.ports import TimezoneLookupPort
from storefront.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class GoogleTimezoneHttpClient(TimezoneLookupPort):
    """Google Time Zone API HTTP 클라이언트."""

    BASE_URL = "https://maps.googleapis.com/maps/api"

    def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._api_key = api_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        base_url=self.BASE_URL,
                        timeout=self._timeout,
                    )
        return self._client

    async def lookup(self, coordinates: Coordinates) -> str:
        """좌표의 IANA 시간대(timeZoneId)를 조회합니다."""
        client = await self._get_client()
        params: dict[str, Any] = {
            "location": f"{coordinates.latitude},{coordinates.longitude}",
            "timestamp": int(time.time()),
            "key": self._api_key,
        }

        try:
            response = await client.get("/timezone/json", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Google timezone API HTTP error",
                extra={"status_code": e.response.status_code},
            )
            raise TimezoneLookupError() from e
        except httpx.HTTPError as e:
            logger.error("Google timezone API request failed", extra={"error": str(e)})
            raise TimezoneLookupError() from e

        return self._parse_response(data)

    def _parse_response(self, data: dict[str, Any]) -> str:
        status = data.get("status")
        timezone_id = data.get("timeZoneId")
        if status != "OK" or not timezone_id:
            logger.error(
                "Google timezone API returned failure",
                extra={"status": status, "error_message": data.get("errorMessage")},
            )
            raise TimezoneLookupError()
        return timezone_id

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

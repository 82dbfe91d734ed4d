"""Get Nearest Location Query.

검색 Query를 limit=1, 고정 반경으로 특화한 것입니다.
거리/정렬 로직은 SearchLocationsQuery와 동일한 코드를 사용합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import (
    NearestLocationNotFoundError,
    OrganizationNotFoundError,
    StartingLocationRequiredError,
)
from storefront.application.search.dto import LocationResultDTO, LocationSearchParams

if TYPE_CHECKING:
    from storefront.application.search.ports import OrganizationReader
    from storefront.application.search.queries.search_locations import SearchLocationsQuery

logger = logging.getLogger(__name__)

DEFAULT_NEAREST_MILE_RADIUS = 0.5


class GetNearestLocationQuery:
    """가장 가까운 위치 조회 Query (체크인/리워드 흐름용)."""

    def __init__(
        self,
        search_query: "SearchLocationsQuery",
        organization_reader: "OrganizationReader",
        mile_radius: float = DEFAULT_NEAREST_MILE_RADIUS,
    ) -> None:
        self._search = search_query
        self._organizations = organization_reader
        self._mile_radius = mile_radius

    async def execute(
        self,
        latitude: float | None,
        longitude: float | None,
        organization_pos_id: int | None = None,
        now: datetime | None = None,
    ) -> LocationResultDTO:
        """출발 좌표에서 반경 내 가장 가까운 위치를 반환합니다.

        Raises:
            StartingLocationRequiredError: 좌표 누락
            OrganizationNotFoundError: POS ID에 해당하는 조직 없음
            NearestLocationNotFoundError: 반경 내 위치 없음
        """
        if latitude is None or longitude is None:
            raise StartingLocationRequiredError()

        organization_id = None
        if organization_pos_id is not None:
            organization = await self._organizations.find_by_pos_id(organization_pos_id)
            if organization is None:
                raise OrganizationNotFoundError()
            organization_id = organization.id

        result = await self._search.execute(
            LocationSearchParams(
                organization_id=organization_id,
                start_from_lat=latitude,
                start_from_long=longitude,
                mile_radius=self._mile_radius,
                limit=1,
            ),
            now=now,
            with_total=False,
        )
        if not result.items:
            logger.info(
                "No nearby location",
                extra={"lat": latitude, "lon": longitude, "mile_radius": self._mile_radius},
            )
            raise NearestLocationNotFoundError()
        return result.items[0]

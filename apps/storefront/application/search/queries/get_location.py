"""Get Location Query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from storefront.application.search.dto import LocationResultDTO
from storefront.application.search.services import RankedRow
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.search.ports import LocationReader
    from storefront.application.search.services import LocationEnricher


class GetLocationQuery:
    """위치 상세 조회 Query.

    검색 결과와 같은 보강 정보에 전체 휴일 목록을 더해 반환합니다.
    """

    def __init__(self, location_reader: "LocationReader", enricher: "LocationEnricher") -> None:
        self._reader = location_reader
        self._enricher = enricher

    async def execute(
        self,
        location_id: int,
        include_deleted: bool = False,
        now: datetime | None = None,
    ) -> LocationResultDTO:
        """ID로 위치를 조회합니다.

        Raises:
            LocationNotFoundError: 위치 없음 (include_deleted=False면 삭제된 위치도 없음으로 취급)
        """
        location = await self._reader.find_by_id(location_id, include_deleted=include_deleted)
        if location is None:
            raise LocationNotFoundError()
        results = await self._enricher.enrich(
            [RankedRow(location=location)], now=now, include_holidays=True
        )
        return results[0]

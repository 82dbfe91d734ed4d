"""Count Locations Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.application.search.ports import LocationReader


class CountLocationsQuery:
    """텍스트 검색 일치 개수 Query."""

    def __init__(self, location_reader: "LocationReader") -> None:
        self._reader = location_reader

    async def execute(self, search: str | None) -> int:
        """빈 검색어는 0을 반환합니다."""
        if not search or not search.strip():
            return 0
        return await self._reader.count_matching(search.strip())

"""Get Hours Today Query."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from storefront.application.search.dto import HoursTodayDTO
from storefront.application.search.services import HoursResolver
from storefront.domain.enums import HourKind
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.search.ports import (
        HoursReader,
        LocationReader,
        OrganizationReader,
    )


class GetHoursTodayQuery:
    """위치의 오늘 영업 상태 Query."""

    def __init__(
        self,
        location_reader: "LocationReader",
        hours_reader: "HoursReader",
        organization_reader: "OrganizationReader",
    ) -> None:
        self._locations = location_reader
        self._hours = hours_reader
        self._organizations = organization_reader

    async def execute(self, location_id: int, now: datetime | None = None) -> HoursTodayDTO | None:
        """오늘의 영업 상태를 반환합니다. 시간대가 없으면 None."""
        location = await self._locations.find_by_id(location_id)
        if location is None:
            raise LocationNotFoundError()

        local = HoursResolver.local_now(location.timezone, now)
        if local is None:
            return None

        rules = await self._hours.list_rules([location_id], HourKind.REGULAR)
        holidays = await self._hours.list_holidays(
            [location_id], start=local.date(), end=local.date()
        )

        allow_off_hours = False
        if location.allow_off_hours and location.organization_id is not None:
            organization = await self._organizations.find_by_id(location.organization_id)
            allow_off_hours = organization is not None and organization.allow_off_hours

        return HoursResolver.resolve_at(
            rules.get(location_id, []),
            local,
            holidays=holidays.get(location_id, []),
            allow_off_hours=allow_off_hours,
        )

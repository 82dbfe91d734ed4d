"""Get Location Hours Queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.domain.enums import HourKind
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.hours.ports import DeliveryTimeSlotGateway
    from storefront.application.search.ports import HoursReader, LocationReader
    from storefront.domain.entities import DeliveryTimeSlot, HolidayOverride, HourRule


class GetLocationHoursQuery:
    """요일 규칙 조회 Query (정규/배달 공용)."""

    def __init__(
        self,
        location_reader: "LocationReader",
        hours_reader: "HoursReader",
        kind: HourKind = HourKind.REGULAR,
    ) -> None:
        self._locations = location_reader
        self._hours = hours_reader
        self._kind = kind

    async def execute(self, location_id: int) -> list[HourRule]:
        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()
        rules = await self._hours.list_rules([location_id], self._kind)
        return rules.get(location_id, [])


class GetHolidaysQuery:
    """휴일 목록 조회 Query."""

    def __init__(self, location_reader: "LocationReader", hours_reader: "HoursReader") -> None:
        self._locations = location_reader
        self._hours = hours_reader

    async def execute(self, location_id: int) -> list[HolidayOverride]:
        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()
        holidays = await self._hours.list_holidays([location_id])
        return holidays.get(location_id, [])


class GetDeliveryTimeSlotsQuery:
    """배달 시간대 조회 Query."""

    def __init__(
        self, location_reader: "LocationReader", slot_gateway: "DeliveryTimeSlotGateway"
    ) -> None:
        self._locations = location_reader
        self._slots = slot_gateway

    async def execute(self, location_id: int, day_num: int | None = None) -> list[DeliveryTimeSlot]:
        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()
        return await self._slots.list_slots(location_id, day_num=day_num)

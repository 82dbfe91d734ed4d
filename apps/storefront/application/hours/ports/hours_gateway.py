"""Hours gateway ports (interfaces).

요일 규칙과 배달 시간대 저장 인터페이스입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Sequence

from storefront.domain.enums import HourKind

if TYPE_CHECKING:
    from storefront.domain.entities import DeliveryTimeSlot, HourRule


class HoursCommandGateway(Protocol):
    """요일 규칙 저장 포트."""

    async def upsert_rules(
        self,
        location_id: int,
        rules: Sequence[HourRule],
        kind: HourKind = HourKind.REGULAR,
    ) -> list[HourRule]:
        """(location_id, day_of_week) 기준으로 규칙을 생성 또는 갱신합니다."""
        ...


class DeliveryTimeSlotGateway(Protocol):
    """배달 시간대 포트."""

    async def list_slots(
        self, location_id: int, day_num: int | None = None
    ) -> list[DeliveryTimeSlot]:
        """day_num, time_slot 순으로 반환합니다."""
        ...

    async def upsert_slots(
        self, location_id: int, slots: Sequence[DeliveryTimeSlot]
    ) -> list[DeliveryTimeSlot]:
        """(location_id, day_num, time_slot) 기준으로 생성 또는 갱신합니다."""
        ...

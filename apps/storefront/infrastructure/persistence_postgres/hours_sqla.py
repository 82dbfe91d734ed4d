"""SQLAlchemy implementation of hours ports."""

from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.search.ports import HoursReader
from storefront.domain.entities import DeliveryTimeSlot, HolidayOverride, HourRule
from storefront.domain.enums import HourKind
from storefront.infrastructure.persistence_postgres.mappers import (
    holiday_to_domain,
    hour_to_domain,
    time_slot_to_domain,
)
from storefront.infrastructure.persistence_postgres.models import (
    DeliveryTimeSlotModel,
    LocationDeliveryHourModel,
    LocationHolidayModel,
    LocationHourModel,
)

_RULE_MODELS = {
    HourKind.REGULAR: LocationHourModel,
    HourKind.DELIVERY: LocationDeliveryHourModel,
}


class SqlaHoursReader(HoursReader):
    """영업시간/휴일 일괄 조회 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_rules(
        self,
        location_ids: Sequence[int],
        kind: HourKind = HourKind.REGULAR,
    ) -> Mapping[int, list[HourRule]]:
        if not location_ids:
            return {}
        model = _RULE_MODELS[kind]
        result = await self._session.execute(
            select(model)
            .where(model.location_id.in_(location_ids))
            .order_by(model.location_id, model.day_of_week)
        )
        grouped: dict[int, list[HourRule]] = defaultdict(list)
        for row in result.scalars().all():
            grouped[int(row.location_id)].append(hour_to_domain(row))
        return dict(grouped)

    async def list_holidays(
        self,
        location_ids: Sequence[int],
        start: date | None = None,
        end: date | None = None,
    ) -> Mapping[int, list[HolidayOverride]]:
        if not location_ids:
            return {}
        query = select(LocationHolidayModel).where(
            LocationHolidayModel.location_id.in_(location_ids)
        )
        if start is not None:
            query = query.where(LocationHolidayModel.holiday_date >= start)
        if end is not None:
            query = query.where(LocationHolidayModel.holiday_date <= end)
        result = await self._session.execute(
            query.order_by(LocationHolidayModel.location_id, LocationHolidayModel.holiday_date)
        )
        grouped: dict[int, list[HolidayOverride]] = defaultdict(list)
        for row in result.scalars().all():
            grouped[int(row.location_id)].append(holiday_to_domain(row))
        return dict(grouped)


class SqlaHoursCommandGateway:
    """요일 규칙 저장 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def upsert_rules(
        self,
        location_id: int,
        rules: Sequence[HourRule],
        kind: HourKind = HourKind.REGULAR,
    ) -> list[HourRule]:
        """(location_id, day_of_week) 기준으로 생성 또는 갱신합니다."""
        model = _RULE_MODELS[kind]
        result = await self._session.execute(select(model).where(model.location_id == location_id))
        by_day = {row.day_of_week: row for row in result.scalars().all()}

        saved = []
        for rule in rules:
            row = by_day.get(rule.day_of_week)
            if row is None:
                row = model(location_id=location_id, day_of_week=rule.day_of_week)
                self._session.add(row)
            row.is_open = rule.is_open
            row.start_time = rule.start_time
            row.end_time = rule.end_time
            saved.append(row)

        await self._session.flush()
        return sorted((hour_to_domain(row) for row in saved), key=lambda r: r.day_of_week)


class SqlaDeliveryTimeSlotGateway:
    """배달 시간대 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_slots(
        self, location_id: int, day_num: int | None = None
    ) -> list[DeliveryTimeSlot]:
        query = select(DeliveryTimeSlotModel).where(
            DeliveryTimeSlotModel.location_id == location_id
        )
        if day_num is not None:
            query = query.where(DeliveryTimeSlotModel.day_num == day_num)
        result = await self._session.execute(
            query.order_by(DeliveryTimeSlotModel.day_num, DeliveryTimeSlotModel.time_slot)
        )
        return [time_slot_to_domain(row) for row in result.scalars().all()]

    async def upsert_slots(
        self, location_id: int, slots: Sequence[DeliveryTimeSlot]
    ) -> list[DeliveryTimeSlot]:
        """(location_id, day_num, time_slot) 기준으로 생성 또는 갱신합니다."""
        result = await self._session.execute(
            select(DeliveryTimeSlotModel).where(DeliveryTimeSlotModel.location_id == location_id)
        )
        existing = {(row.day_num, row.time_slot): row for row in result.scalars().all()}

        saved = []
        for slot in slots:
            row = existing.get((slot.day_num, slot.time_slot))
            if row is None:
                row = DeliveryTimeSlotModel(
                    location_id=location_id, day_num=slot.day_num, time_slot=slot.time_slot
                )
                self._session.add(row)
                existing[(slot.day_num, slot.time_slot)] = row
            row.day = slot.day
            row.max_orders_per_hour = slot.max_orders_per_hour
            saved.append(row)

        await self._session.flush()
        return [time_slot_to_domain(row) for row in saved]

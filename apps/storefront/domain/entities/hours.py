"""Hours Entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time


@dataclass(frozen=True)
class HourRule:
    """요일별 영업(또는 배달) 시간 규칙.

    day_of_week는 0=일요일 ~ 6=토요일입니다.
    is_open이면 start_time < end_time 이어야 하며 자정을 넘는 구간은 허용하지 않습니다.
    """

    day_of_week: int
    is_open: bool
    start_time: time | None = None
    end_time: time | None = None
    location_id: int | None = None
    id: int | None = None


@dataclass(frozen=True)
class HolidayOverride:
    """특정 날짜의 요일 규칙을 대체하는 휴일 규칙."""

    date: date
    is_open: bool = False
    start_time: time | None = None
    end_time: time | None = None
    title: str | None = None
    location_id: int | None = None
    id: int | None = None


@dataclass(frozen=True)
class DeliveryTimeSlot:
    """배달 시간대와 시간당 최대 주문 수."""

    day: str
    day_num: int
    time_slot: str
    max_orders_per_hour: int
    location_id: int | None = None
    id: int | None = None

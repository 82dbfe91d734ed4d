"""Hours input DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HourRuleInput:
    """요일 규칙 저장 요청 (시각은 문자열 그대로)."""

    day_of_week: int
    is_open: bool
    start_time: str | None = None
    end_time: str | None = None


@dataclass(frozen=True)
class TimeSlotInput:
    """배달 시간대 저장 요청."""

    day: str
    day_num: int
    time_slot: str
    max_orders_per_hour: int

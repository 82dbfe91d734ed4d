"""Hour Rule Validator.

저장 전에 요일 규칙 전체를 검증합니다.
하나라도 실패하면 아무것도 저장하지 않습니다.
"""

from __future__ import annotations

from datetime import datetime, time
from typing import Sequence

from storefront.application.hours.dto import HourRuleInput, TimeSlotInput
from storefront.domain.entities import DeliveryTimeSlot, HourRule
from storefront.domain.exceptions import (
    DuplicateDayOfWeekError,
    InvalidDayOfWeekError,
    InvalidTimeError,
    InvalidTimeRangeError,
)

_TIME_FORMATS = ("%H:%M:%S", "%H:%M", "%I:%M %p", "%I:%M:%S %p")


def parse_time_of_day(text: str) -> time:
    """`HH:MM`, `HH:MM:SS`, `hh:mm AM` 형식의 시각을 파싱합니다.

    Raises:
        InvalidTimeError: 해석할 수 없는 시각
    """
    value = text.strip()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise InvalidTimeError()


class HourRuleValidator:
    """요일 규칙 검증 서비스."""

    @staticmethod
    def validate_rules(location_id: int, inputs: Sequence[HourRuleInput]) -> list[HourRule]:
        """입력을 검증하고 HourRule로 변환합니다.

        Raises:
            InvalidDayOfWeekError: 0..6 범위 밖의 요일
            DuplicateDayOfWeekError: 같은 요일 중복
            InvalidTimeError: 시각 누락 또는 형식 오류
            InvalidTimeRangeError: start >= end
        """
        seen: set[int] = set()
        rules: list[HourRule] = []
        for item in inputs:
            if not 0 <= item.day_of_week <= 6:
                raise InvalidDayOfWeekError(item.day_of_week)
            if item.day_of_week in seen:
                raise DuplicateDayOfWeekError(item.day_of_week)
            seen.add(item.day_of_week)

            start = parse_time_of_day(item.start_time) if item.start_time else None
            end = parse_time_of_day(item.end_time) if item.end_time else None
            if item.is_open:
                if start is None or end is None:
                    raise InvalidTimeError()
                if start >= end:
                    raise InvalidTimeRangeError()

            rules.append(
                HourRule(
                    day_of_week=item.day_of_week,
                    is_open=item.is_open,
                    start_time=start,
                    end_time=end,
                    location_id=location_id,
                )
            )
        return rules

    @staticmethod
    def validate_slots(location_id: int, inputs: Sequence[TimeSlotInput]) -> list[DeliveryTimeSlot]:
        """배달 시간대 입력을 검증합니다."""
        slots: list[DeliveryTimeSlot] = []
        for item in inputs:
            if not 0 <= item.day_num <= 6:
                raise InvalidDayOfWeekError(item.day_num)
            if not item.time_slot or not item.time_slot.strip():
                raise InvalidTimeError()
            slots.append(
                DeliveryTimeSlot(
                    day=item.day,
                    day_num=item.day_num,
                    time_slot=item.time_slot.strip(),
                    max_orders_per_hour=item.max_orders_per_hour,
                    location_id=location_id,
                )
            )
        return slots

"""Hours Resolver Service.

위치의 현지 시간대 기준으로 "지금 영업 중인가"를 판정합니다.
서버/프로세스의 시간대와 무관하게 동작하며, 시간대가 없거나 알 수 없으면
UTC로 가정하지 않고 None(미계산)을 반환합니다.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time, timezone
from typing import Iterable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from storefront.application.search.dto import HoursTodayDTO
from storefront.domain.entities import HolidayOverride, HourRule

logger = logging.getLogger(__name__)

REGULAR_TIME_FORMAT = "%H:%M:%S"
DELIVERY_TIME_FORMAT = "%I:%M %p"

CLOSED = HoursTodayDTO(is_open=False)


class HoursResolver:
    """오늘의 영업 상태 계산 서비스.

    Workflow:
        1. 현재 시각을 위치 시간대의 현지 시각으로 변환
        2. 현지 요일(0=일요일)과 시각 계산
        3. 오늘 날짜의 휴일 규칙이 있으면 요일 규칙 대신 사용
        4. 규칙이 없거나 휴무면 닫힘
        5. [start, end) 구간 안이면 열림
    """

    @staticmethod
    def local_now(timezone_name: str | None, now: datetime | None = None) -> datetime | None:
        """현재 시각을 위치의 현지 시각으로 변환합니다.

        Args:
            timezone_name: IANA 시간대 (예: "America/Los_Angeles")
            now: 기준 시각. naive 값은 UTC로 간주합니다.

        Returns:
            현지 시각 또는 None (시간대 없음/알 수 없음)
        """
        if not timezone_name:
            return None
        try:
            zone = ZoneInfo(timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown location timezone", extra={"timezone": timezone_name})
            return None
        instant = now or datetime.now(timezone.utc)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(zone)

    @staticmethod
    def day_of_week(local: datetime | date) -> int:
        """0=일요일 ~ 6=토요일."""
        return local.isoweekday() % 7

    @classmethod
    def resolve(
        cls,
        rules: Iterable[HourRule],
        timezone_name: str | None,
        *,
        holidays: Iterable[HolidayOverride] = (),
        now: datetime | None = None,
        allow_off_hours: bool = False,
        time_format: str = REGULAR_TIME_FORMAT,
    ) -> HoursTodayDTO | None:
        """정규 영업시간 기준 오늘의 상태를 계산합니다.

        Args:
            rules: 요일별 영업시간 규칙
            timezone_name: 위치 시간대
            holidays: 휴일 규칙 (오늘 현지 날짜와 일치하는 것만 사용)
            now: 기준 시각 (테스트용 고정 시각)
            allow_off_hours: 위치와 조직이 모두 영업시간 외 운영을 허용하는지 여부
            time_format: opens_at/closes_at 표시 형식

        Returns:
            HoursTodayDTO 또는 None (시간대 없음)
        """
        local = cls.local_now(timezone_name, now)
        if local is None:
            return None
        return cls.resolve_at(
            rules,
            local,
            holidays=holidays,
            allow_off_hours=allow_off_hours,
            time_format=time_format,
        )

    @classmethod
    def resolve_at(
        cls,
        rules: Iterable[HourRule],
        local: datetime,
        *,
        holidays: Iterable[HolidayOverride] = (),
        allow_off_hours: bool = False,
        time_format: str = REGULAR_TIME_FORMAT,
    ) -> HoursTodayDTO:
        """이미 현지 시각으로 변환된 시각 기준으로 상태를 계산합니다."""
        holiday = cls.holiday_for(holidays, local.date())
        if holiday is not None:
            status = cls._evaluate(
                holiday.is_open, holiday.start_time, holiday.end_time, local.time(), time_format
            )
        else:
            rule = cls.rule_for(rules, cls.day_of_week(local))
            if rule is None:
                status = CLOSED
            else:
                status = cls._evaluate(
                    rule.is_open, rule.start_time, rule.end_time, local.time(), time_format
                )

        if allow_off_hours and not status.is_open:
            return replace(status, is_open=True, is_off_hours=True)
        return status

    @classmethod
    def resolve_delivery(
        cls,
        delivery_rules: Iterable[HourRule],
        timezone_name: str | None,
        *,
        regular_rules: Iterable[HourRule] = (),
        holidays: Iterable[HolidayOverride] = (),
        now: datetime | None = None,
        time_format: str = DELIVERY_TIME_FORMAT,
    ) -> HoursTodayDTO | None:
        """배달 시간 기준 오늘의 상태를 계산합니다.

        휴무 휴일이면 배달도 닫힙니다. 배달 시간이 열려 있고 정규 영업은
        닫혀 있으면 is_off_hours=True 입니다.
        """
        local = cls.local_now(timezone_name, now)
        if local is None:
            return None

        holidays = list(holidays)
        holiday = cls.holiday_for(holidays, local.date())
        if holiday is not None and not holiday.is_open:
            return CLOSED

        rule = cls.rule_for(delivery_rules, cls.day_of_week(local))
        if rule is None:
            return CLOSED
        status = cls._evaluate(
            rule.is_open, rule.start_time, rule.end_time, local.time(), time_format
        )
        if not status.is_open:
            return status

        regular = cls.resolve_at(regular_rules, local, holidays=holidays)
        return replace(status, is_off_hours=not regular.is_open)

    @staticmethod
    def rule_for(rules: Iterable[HourRule], day_of_week: int) -> HourRule | None:
        for rule in rules:
            if rule.day_of_week == day_of_week:
                return rule
        return None

    @staticmethod
    def holiday_for(holidays: Iterable[HolidayOverride], on: date) -> HolidayOverride | None:
        for holiday in holidays:
            if holiday.date == on:
                return holiday
        return None

    @staticmethod
    def _evaluate(
        is_open: bool,
        start: time | None,
        end: time | None,
        current: time,
        time_format: str,
    ) -> HoursTodayDTO:
        if not is_open or start is None or end is None:
            return CLOSED
        opens_at = start.strftime(time_format)
        closes_at = end.strftime(time_format)
        return HoursTodayDTO(
            is_open=start <= current < end,
            opens_at=opens_at,
            closes_at=closes_at,
        )

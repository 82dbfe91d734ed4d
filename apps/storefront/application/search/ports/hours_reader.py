"""Hours Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Mapping, Sequence

from storefront.domain.entities import HolidayOverride, HourRule
from storefront.domain.enums import HourKind


class HoursReader(ABC):
    """영업시간/휴일 일괄 조회 포트.

    결과 행마다 개별 조회하지 않도록 위치 ID 목록을 받아 한 번에 조회합니다.
    """

    @abstractmethod
    async def list_rules(
        self,
        location_ids: Sequence[int],
        kind: HourKind = HourKind.REGULAR,
    ) -> Mapping[int, list[HourRule]]:
        """위치별 요일 규칙을 day_of_week 순으로 반환합니다.

        Args:
            location_ids: 위치 ID 목록
            kind: 정규 영업시간 또는 배달 시간

        Returns:
            {location_id: [HourRule, ...]}
        """
        ...

    @abstractmethod
    async def list_holidays(
        self,
        location_ids: Sequence[int],
        start: date | None = None,
        end: date | None = None,
    ) -> Mapping[int, list[HolidayOverride]]:
        """위치별 휴일 규칙을 날짜 순으로 반환합니다.

        start/end가 주어지면 그 구간(양 끝 포함)의 휴일만 반환합니다.
        """
        ...

"""Location Result DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.entities import HolidayOverride, HourRule, Location


@dataclass(frozen=True)
class HoursTodayDTO:
    """오늘의 영업 상태.

    is_off_hours는 정규 일정 밖에서 열려 있는 상태(영업시간 외 허용 또는
    매장은 닫혔지만 배달만 가능한 시간)를 나타냅니다.
    """

    is_open: bool
    opens_at: str | None = None
    closes_at: str | None = None
    is_off_hours: bool = False


@dataclass(frozen=True)
class LocationResultDTO:
    """검색 결과 위치 DTO."""

    location: Location
    distance: float | None = None
    rating: float | None = None
    rating_count: int = 0
    hours: list[HourRule] = field(default_factory=list)
    delivery_hours: list[HourRule] = field(default_factory=list)
    holidays: list[HolidayOverride] | None = None
    hours_today: HoursTodayDTO | None = None
    delivery_hours_today: HoursTodayDTO | None = None

    @property
    def id(self) -> int | None:
        return self.location.id


@dataclass(frozen=True)
class LocationSearchResultDTO:
    """검색 결과 페이지와 전체 개수."""

    items: list[LocationResultDTO]
    total_count: int

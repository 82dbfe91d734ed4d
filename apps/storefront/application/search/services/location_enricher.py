"""Location Enricher.

검색 결과 페이지에 평점, 영업시간, 배달시간, 휴일, 오늘의 영업 상태를 붙입니다.
결과 행마다 조회하지 않고 위치 ID 목록으로 일괄 조회합니다(2단계 조회).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Sequence

from storefront.application.search.dto import LocationResultDTO
from storefront.application.search.services.hours_resolver import (
    DELIVERY_TIME_FORMAT,
    HoursResolver,
)
from storefront.application.search.services.rating_aggregator import RatingAggregator
from storefront.application.search.services.search_ordering import RankedRow
from storefront.domain.enums import HourKind

if TYPE_CHECKING:
    from storefront.application.search.ports import (
        HoursReader,
        LocationReader,
        OrganizationReader,
    )

logger = logging.getLogger(__name__)


class LocationEnricher:
    """검색 결과 보강 서비스."""

    def __init__(
        self,
        location_reader: "LocationReader",
        hours_reader: "HoursReader",
        organization_reader: "OrganizationReader",
        delivery_time_format: str = DELIVERY_TIME_FORMAT,
    ) -> None:
        self._location_reader = location_reader
        self._hours_reader = hours_reader
        self._organization_reader = organization_reader
        self._delivery_time_format = delivery_time_format

    async def load_ratings(self, rows: Sequence[RankedRow]) -> None:
        """행에 평점 요약을 채웁니다."""
        ids = [row.location.id for row in rows if row.location.id is not None]
        if not ids:
            return
        stats = await self._location_reader.fetch_rating_stats(ids)
        for row in rows:
            mean, count = stats.get(row.location.id, (None, 0))
            summary = RatingAggregator.summarize(mean, count)
            row.rating = summary.rating
            row.rating_count = summary.rating_count

    async def enrich(
        self,
        rows: Sequence[RankedRow],
        *,
        now: datetime | None = None,
        include_holidays: bool = False,
    ) -> list[LocationResultDTO]:
        """결과 행을 DTO로 변환합니다.

        Args:
            rows: 정렬/페이지 처리된 행
            now: 기준 시각 (테스트용 고정 시각)
            include_holidays: 전체 휴일 목록을 결과에 포함할지 여부

        Returns:
            LocationResultDTO 목록 (입력 순서 유지)
        """
        ids = [row.location.id for row in rows if row.location.id is not None]
        if not ids:
            return []

        await self.load_ratings(rows)

        instant = now or datetime.now(timezone.utc)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        hours = await self._hours_reader.list_rules(ids, HourKind.REGULAR)
        delivery_hours = await self._hours_reader.list_rules(ids, HourKind.DELIVERY)
        if include_holidays:
            holidays = await self._hours_reader.list_holidays(ids)
        else:
            # 모든 시간대의 "오늘"이 UTC 날짜 ±1일 안에 있음
            utc_today = instant.astimezone(timezone.utc).date()
            holidays = await self._hours_reader.list_holidays(
                ids, start=utc_today - timedelta(days=1), end=utc_today + timedelta(days=1)
            )

        organization_ids = sorted(
            {row.location.organization_id for row in rows if row.location.organization_id}
        )
        organizations = (
            await self._organization_reader.find_by_ids(organization_ids)
            if organization_ids
            else {}
        )

        results: list[LocationResultDTO] = []
        for row in rows:
            location = row.location
            organization = organizations.get(location.organization_id)
            allow_off_hours = bool(
                location.allow_off_hours
                and organization is not None
                and organization.allow_off_hours
            )
            location_hours = hours.get(location.id, [])
            location_delivery_hours = delivery_hours.get(location.id, [])
            location_holidays = holidays.get(location.id, [])

            results.append(
                LocationResultDTO(
                    location=location,
                    distance=row.distance,
                    rating=row.rating,
                    rating_count=row.rating_count,
                    hours=location_hours,
                    delivery_hours=location_delivery_hours,
                    holidays=location_holidays if include_holidays else None,
                    hours_today=HoursResolver.resolve(
                        location_hours,
                        location.timezone,
                        holidays=location_holidays,
                        now=instant,
                        allow_off_hours=allow_off_hours,
                    ),
                    delivery_hours_today=HoursResolver.resolve_delivery(
                        location_delivery_hours,
                        location.timezone,
                        regular_rules=location_hours,
                        holidays=location_holidays,
                        now=instant,
                        time_format=self._delivery_time_format,
                    ),
                )
            )

        logger.debug("Locations enriched", extra={"count": len(results)})
        return results

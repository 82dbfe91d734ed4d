"""Test fixtures for storefront tests."""

from __future__ import annotations

from datetime import datetime, time, timezone
from typing import Mapping, Sequence
from unittest.mock import AsyncMock

import pytest

from storefront.application.search.dto import (
    LocationCriteria,
    LocationHit,
    LocationPage,
    SortSpec,
)
from storefront.application.search.services import (
    GeoIndexService,
    RankedRow,
    RatingAggregator,
    SearchOrderingService,
)
from storefront.domain.entities import HourRule, Location, Organization
from storefront.domain.enums import SortColumn
from storefront.domain.value_objects import Coordinates

# ISBX 사무실 (Los Angeles)
ORIGIN_LAT = 34.020575
ORIGIN_LONG = -118.424138

LA_TIMEZONE = "America/Los_Angeles"

# 2024-01-01은 월요일. 21:00 UTC = 13:00 PST
MONDAY_1PM_LA = datetime(2024, 1, 1, 21, 0, 0, tzinfo=timezone.utc)
# 2024-01-02 07:57:30 UTC = 월요일 23:57:30 PST
MONDAY_1157PM_LA = datetime(2024, 1, 2, 7, 57, 30, tzinfo=timezone.utc)

MONDAY = 1


def make_location(
    location_id: int,
    name: str,
    longitude: float | None = None,
    latitude: float | None = None,
    **overrides,
) -> Location:
    """테스트용 Location 생성."""
    coordinates = (
        Coordinates(longitude=longitude, latitude=latitude)
        if longitude is not None and latitude is not None
        else None
    )
    values = {
        "id": location_id,
        "name": name,
        "organization_id": 1,
        "city": "Los Angeles",
        "coordinates": coordinates,
        "timezone": LA_TIMEZONE,
    }
    values.update(overrides)
    return Location(**values)


def serve_locations(
    reader: AsyncMock,
    locations: Sequence[Location],
    ratings: Mapping[int, tuple[float, int]] | None = None,
) -> None:
    """reader.search를 메모리 검색으로 대체합니다.

    SQL 어댑터와 같은 규칙(영역, 반경, 정렬, NULL 마지막, id 보조 정렬, 절단)을
    GeoIndexService와 SearchOrderingService로 재현합니다.
    """
    ratings = ratings or {}

    async def search(criteria: LocationCriteria) -> LocationPage:
        rows = []
        for location in locations:
            if location.deleted and not criteria.include_deleted:
                continue
            if (
                criteria.organization_id is not None
                and location.organization_id != criteria.organization_id
            ):
                continue
            box = criteria.bounding_box
            if box is not None and not GeoIndexService.within_bounding_box(
                location.coordinates, box.min_lon, box.min_lat, box.max_lon, box.max_lat
            ):
                continue
            distance = GeoIndexService.distance_between(criteria.origin, location.coordinates)
            if criteria.origin is not None and criteria.radius_km is not None:
                if distance is None or distance > criteria.radius_km:
                    continue
            mean, count = ratings.get(location.id, (None, 0))
            rows.append(
                RankedRow(
                    location=location,
                    distance=distance,
                    rating=RatingAggregator.round_half(mean),
                    rating_count=count,
                )
            )

        specs = [
            spec
            for spec in criteria.order
            if spec.column != SortColumn.DISTANCE or criteria.origin is not None
        ]
        if all(spec.column != SortColumn.ID for spec in specs):
            specs.append(SortSpec(SortColumn.ID))
        ranked = SearchOrderingService.rank(rows, specs)
        window = ranked[criteria.offset : criteria.offset + criteria.limit]
        return LocationPage(
            hits=[LocationHit(location=row.location, distance=row.distance) for row in window],
            total_count=len(ranked) if criteria.with_total else len(window),
        )

    reader.search.side_effect = search


@pytest.fixture
def isbx() -> Location:
    return make_location(1, "ISBX", ORIGIN_LONG, ORIGIN_LAT)


@pytest.fixture
def cvs() -> Location:
    return make_location(2, "CVS", -118.4167, 34.0249)


@pytest.fixture
def burger_king() -> Location:
    return make_location(3, "Burger King", -118.4030, 34.0300)


@pytest.fixture
def westfield_century() -> Location:
    return make_location(4, "Westfield Century", -118.4196, 34.0584)


@pytest.fixture
def seeded_locations(
    westfield_century: Location, burger_king: Location, isbx: Location, cvs: Location
) -> list[Location]:
    """거리 순서와 다른 순서로 반환되는 후보 목록."""
    return [westfield_century, burger_king, isbx, cvs]


@pytest.fixture
def organization() -> Organization:
    return Organization(id=1, name="ISBX Foods", pos_id=1001, allow_off_hours=True)


@pytest.fixture
def monday_rule() -> HourRule:
    """월요일 08:00 ~ 17:55."""
    return HourRule(
        day_of_week=MONDAY,
        is_open=True,
        start_time=time(8, 0),
        end_time=time(17, 55),
        location_id=1,
        id=10,
    )


@pytest.fixture
def mock_location_reader() -> AsyncMock:
    """LocationReader mock."""
    reader = AsyncMock()
    reader.search = AsyncMock(return_value=LocationPage())
    reader.find_by_id = AsyncMock(return_value=None)
    reader.count_matching = AsyncMock(return_value=0)
    reader.fetch_rating_stats = AsyncMock(return_value={})
    reader.is_assigned = AsyncMock(return_value=False)
    return reader


@pytest.fixture
def mock_hours_reader() -> AsyncMock:
    """HoursReader mock."""
    reader = AsyncMock()
    reader.list_rules = AsyncMock(return_value={})
    reader.list_holidays = AsyncMock(return_value={})
    return reader


@pytest.fixture
def mock_organization_reader(organization: Organization) -> AsyncMock:
    """OrganizationReader mock."""
    reader = AsyncMock()
    reader.find_by_id = AsyncMock(return_value=organization)
    reader.find_by_pos_id = AsyncMock(return_value=organization)
    reader.find_by_ids = AsyncMock(return_value={organization.id: organization})
    return reader


@pytest.fixture
def mock_transaction_manager() -> AsyncMock:
    tx = AsyncMock()
    tx.commit = AsyncMock()
    tx.rollback = AsyncMock()
    return tx

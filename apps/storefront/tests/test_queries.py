"""Application Queries 단위 테스트."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from unittest.mock import AsyncMock

import pytest

from storefront.application.catalog.queries import GetProductQuery, ListProductsQuery
from storefront.application.common.exceptions import (
    InvalidOrderError,
    InvalidStartingCoordinatesError,
    NearestLocationNotFoundError,
    OrganizationNotFoundError,
    ProductNotFoundError,
    StartingLocationRequiredError,
)
from storefront.application.hours.queries import (
    GetDeliveryTimeSlotsQuery,
    GetHolidaysQuery,
    GetLocationHoursQuery,
)
from storefront.application.listings.queries import (
    ListActiveDealsCountQuery,
    ListAssignedUsersQuery,
    ListLocationCouponsQuery,
)
from storefront.application.search.dto import (
    BoundingBox,
    LocationCriteria,
    LocationSearchParams,
)
from storefront.application.search.queries import (
    CountLocationsQuery,
    GetHoursTodayQuery,
    GetLocationQuery,
    GetNearestLocationQuery,
    SearchLocationsQuery,
)
from storefront.application.search.services import LocationEnricher, SearchOrderingService
from storefront.domain.entities import HolidayOverride, HourRule, Location
from storefront.domain.enums import ActiveDealsSortColumn, HourKind, ProductSortColumn
from storefront.domain.exceptions import LocationNotFoundError
from storefront.domain.value_objects import Coordinates
from storefront.tests.conftest import (
    MONDAY_1157PM_LA,
    MONDAY_1PM_LA,
    ORIGIN_LAT,
    ORIGIN_LONG,
    serve_locations,
)

pytestmark = pytest.mark.asyncio


@pytest.fixture
def enricher(
    mock_location_reader: AsyncMock,
    mock_hours_reader: AsyncMock,
    mock_organization_reader: AsyncMock,
) -> LocationEnricher:
    return LocationEnricher(mock_location_reader, mock_hours_reader, mock_organization_reader)


@pytest.fixture
def search_query(
    mock_location_reader: AsyncMock, enricher: LocationEnricher
) -> SearchLocationsQuery:
    return SearchLocationsQuery(mock_location_reader, enricher)


def _names(result) -> list[str]:
    return [item.location.name for item in result.items]


class TestSearchLocationsQuery:
    """SearchLocationsQuery 테스트."""

    async def test_partial_origin_is_rejected(
        self, search_query: SearchLocationsQuery, mock_location_reader: AsyncMock
    ) -> None:
        """출발 좌표 중 하나만 있으면 검증 오류."""
        with pytest.raises(InvalidStartingCoordinatesError):
            await search_query.execute(LocationSearchParams(start_from_lat=ORIGIN_LAT))
        with pytest.raises(InvalidStartingCoordinatesError):
            await search_query.execute(LocationSearchParams(start_from_long=ORIGIN_LONG))

        mock_location_reader.search.assert_not_called()

    async def test_without_origin_distance_is_null(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        result = await search_query.execute(LocationSearchParams())

        assert result.total_count == 4
        assert all(item.distance is None for item in result.items)
        # 기본 정렬: priority(모두 NULL) → name
        assert _names(result) == ["Burger King", "CVS", "ISBX", "Westfield Century"]

    async def test_orders_by_distance_from_origin(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        """출발 좌표가 있으면 priority → distance 순."""
        serve_locations(mock_location_reader, seeded_locations)

        result = await search_query.execute(
            LocationSearchParams(start_from_lat=ORIGIN_LAT, start_from_long=ORIGIN_LONG, limit=4)
        )

        assert _names(result) == ["ISBX", "CVS", "Burger King", "Westfield Century"]
        distances = [item.distance for item in result.items]
        assert distances[0] == pytest.approx(0.0)
        assert distances == sorted(distances)

    async def test_priority_precedes_distance(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        prioritized = [
            replace(loc, priority=1) if loc.name == "Westfield Century" else loc
            for loc in seeded_locations
        ]
        serve_locations(mock_location_reader, prioritized)

        result = await search_query.execute(
            LocationSearchParams(start_from_lat=ORIGIN_LAT, start_from_long=ORIGIN_LONG)
        )

        assert _names(result)[0] == "Westfield Century"

    async def test_explicit_order_replaces_distance_ordering(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        result = await search_query.execute(
            LocationSearchParams(
                start_from_lat=ORIGIN_LAT,
                start_from_long=ORIGIN_LONG,
                limit=4,
                order="name ASC",
            )
        )

        assert _names(result) == ["Burger King", "CVS", "ISBX", "Westfield Century"]
        assert _names(result) != ["ISBX", "CVS", "Burger King", "Westfield Century"]

    async def test_invalid_order(
        self, search_query: SearchLocationsQuery, mock_location_reader: AsyncMock
    ) -> None:
        with pytest.raises(InvalidOrderError):
            await search_query.execute(LocationSearchParams(order="secret DESC"))
        mock_location_reader.search.assert_not_called()

    async def test_mile_radius_filters_far_rows(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        result = await search_query.execute(
            LocationSearchParams(
                start_from_lat=ORIGIN_LAT, start_from_long=ORIGIN_LONG, mile_radius=1.0
            )
        )

        assert _names(result) == ["ISBX", "CVS"]
        assert result.total_count == 2

    async def test_mile_radius_excludes_rows_without_coordinates(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        isbx: Location,
    ) -> None:
        no_coordinates = Location(id=9, name="Kiosk", timezone=None)
        serve_locations(mock_location_reader, [isbx, no_coordinates])

        result = await search_query.execute(
            LocationSearchParams(
                start_from_lat=ORIGIN_LAT, start_from_long=ORIGIN_LONG, mile_radius=5.0
            )
        )

        assert _names(result) == ["ISBX"]

    async def test_bounding_box_requires_all_four_values(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        boxed = await search_query.execute(
            LocationSearchParams(min_lat=34.05, min_long=-118.43, max_lat=34.07, max_long=-118.41)
        )
        partial = await search_query.execute(LocationSearchParams(min_lat=34.05, max_lat=34.07))

        assert _names(boxed) == ["Westfield Century"]
        assert partial.total_count == 4

    async def test_pagination_and_total_count(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        result = await search_query.execute(
            LocationSearchParams(
                start_from_lat=ORIGIN_LAT, start_from_long=ORIGIN_LONG, page=1, limit=2
            )
        )

        assert _names(result) == ["Burger King", "Westfield Century"]
        assert result.total_count == 4

    async def test_relational_filters_are_delegated(
        self, search_query: SearchLocationsQuery, mock_location_reader: AsyncMock
    ) -> None:
        await search_query.execute(
            LocationSearchParams(
                search="burger",
                organization_id=3,
                assigned_user_id=5,
                coupon_id=8,
                include_deleted=True,
                delivery_available_only=True,
            )
        )

        mock_location_reader.search.assert_awaited_once_with(
            LocationCriteria(
                search="burger",
                organization_id=3,
                assigned_user_id=5,
                coupon_id=8,
                include_deleted=True,
                delivery_available_only=True,
                order=SearchOrderingService.default_specs(has_origin=False),
            )
        )

    async def test_geometry_and_page_are_pushed_to_reader(
        self, search_query: SearchLocationsQuery, mock_location_reader: AsyncMock
    ) -> None:
        await search_query.execute(
            LocationSearchParams(
                min_lat=34.0,
                min_long=-118.5,
                max_lat=34.1,
                max_long=-118.3,
                start_from_lat=ORIGIN_LAT,
                start_from_long=ORIGIN_LONG,
                mile_radius=2.0,
                page=3,
                limit=25,
            )
        )

        criteria = mock_location_reader.search.call_args.args[0]
        assert criteria.bounding_box == BoundingBox(
            min_lon=-118.5, min_lat=34.0, max_lon=-118.3, max_lat=34.1
        )
        assert criteria.origin == Coordinates(longitude=ORIGIN_LONG, latitude=ORIGIN_LAT)
        assert criteria.radius_km == pytest.approx(2.0 * 1.609344)
        assert criteria.offset == 75
        assert criteria.limit == 25
        assert criteria.with_total is True

    async def test_radius_without_origin_is_ignored(
        self, search_query: SearchLocationsQuery, mock_location_reader: AsyncMock
    ) -> None:
        await search_query.execute(LocationSearchParams(mile_radius=1.0, min_lat=34.0))

        criteria = mock_location_reader.search.call_args.args[0]
        assert criteria.origin is None
        assert criteria.radius_km is None
        assert criteria.bounding_box is None

    async def test_rating_order_loads_ratings_once(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        isbx: Location,
        cvs: Location,
    ) -> None:
        stats = {1: (3.2, 4), 2: (4.8, 10)}
        serve_locations(mock_location_reader, [isbx, cvs], ratings=stats)
        mock_location_reader.fetch_rating_stats.return_value = stats

        result = await search_query.execute(LocationSearchParams(order="rating DESC"))

        assert _names(result) == ["CVS", "ISBX"]
        assert [item.rating for item in result.items] == [5.0, 3.0]
        assert [item.rating_count for item in result.items] == [10, 4]
        mock_location_reader.fetch_rating_stats.assert_awaited_once()

    async def test_enrichment_computes_hours_today(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        isbx: Location,
        monday_rule: HourRule,
    ) -> None:
        serve_locations(mock_location_reader, [isbx])
        mock_hours_reader.list_rules.side_effect = lambda ids, kind: (
            {1: [monday_rule]} if kind == HourKind.REGULAR else {}
        )

        open_result = await search_query.execute(LocationSearchParams(), now=MONDAY_1PM_LA)
        closed_result = await search_query.execute(LocationSearchParams(), now=MONDAY_1157PM_LA)

        item = open_result.items[0]
        assert item.hours == [monday_rule]
        assert item.holidays is None
        assert item.hours_today is not None and item.hours_today.is_open is True
        assert item.delivery_hours_today is not None
        assert item.delivery_hours_today.is_open is False
        assert closed_result.items[0].hours_today.is_open is False

    async def test_off_hours_requires_organization_opt_in(
        self,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        mock_organization_reader: AsyncMock,
        isbx: Location,
        monday_rule: HourRule,
    ) -> None:
        serve_locations(mock_location_reader, [replace(isbx, allow_off_hours=True)])
        mock_hours_reader.list_rules.return_value = {1: [monday_rule]}

        allowed = await search_query.execute(LocationSearchParams(), now=MONDAY_1157PM_LA)
        mock_organization_reader.find_by_ids.return_value = {}
        denied = await search_query.execute(LocationSearchParams(), now=MONDAY_1157PM_LA)

        assert allowed.items[0].hours_today.is_off_hours is True
        assert denied.items[0].hours_today.is_open is False

    async def test_empty_page_skips_enrichment(
        self,
        search_query: SearchLocationsQuery,
        mock_hours_reader: AsyncMock,
    ) -> None:
        result = await search_query.execute(LocationSearchParams(search="nothing"))

        assert result.items == []
        assert result.total_count == 0
        mock_hours_reader.list_rules.assert_not_called()


class TestGetNearestLocationQuery:
    """GetNearestLocationQuery 테스트."""

    @pytest.fixture
    def nearest_query(
        self,
        search_query: SearchLocationsQuery,
        mock_organization_reader: AsyncMock,
    ) -> GetNearestLocationQuery:
        return GetNearestLocationQuery(search_query, mock_organization_reader)

    async def test_coincident_origin_returns_that_location(
        self,
        nearest_query: GetNearestLocationQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        result = await nearest_query.execute(latitude=34.0300, longitude=-118.4030)

        assert result.location.name == "Burger King"
        assert result.distance == pytest.approx(0.0)

    async def test_origin_100_miles_away_is_not_found(
        self,
        nearest_query: GetNearestLocationQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)

        with pytest.raises(NearestLocationNotFoundError):
            # 위도 1.5도 ≈ 103 마일
            await nearest_query.execute(latitude=ORIGIN_LAT + 1.5, longitude=ORIGIN_LONG)

    async def test_default_radius_is_half_mile(
        self,
        nearest_query: GetNearestLocationQuery,
        mock_location_reader: AsyncMock,
        cvs: Location,
    ) -> None:
        """CVS는 ISBX에서 약 0.52 마일."""
        serve_locations(mock_location_reader, [cvs])

        with pytest.raises(NearestLocationNotFoundError):
            await nearest_query.execute(latitude=ORIGIN_LAT, longitude=ORIGIN_LONG)

    @pytest.mark.parametrize(("lat", "lon"), [(None, ORIGIN_LONG), (ORIGIN_LAT, None)])
    async def test_missing_origin(
        self, nearest_query: GetNearestLocationQuery, lat, lon
    ) -> None:
        with pytest.raises(StartingLocationRequiredError):
            await nearest_query.execute(latitude=lat, longitude=lon)

    async def test_unknown_pos_id(
        self,
        nearest_query: GetNearestLocationQuery,
        mock_organization_reader: AsyncMock,
    ) -> None:
        mock_organization_reader.find_by_pos_id.return_value = None

        with pytest.raises(OrganizationNotFoundError):
            await nearest_query.execute(
                latitude=ORIGIN_LAT, longitude=ORIGIN_LONG, organization_pos_id=999
            )

    async def test_pos_id_scopes_to_organization(
        self,
        nearest_query: GetNearestLocationQuery,
        mock_location_reader: AsyncMock,
        isbx: Location,
    ) -> None:
        serve_locations(mock_location_reader, [isbx])

        await nearest_query.execute(
            latitude=ORIGIN_LAT, longitude=ORIGIN_LONG, organization_pos_id=1001
        )

        criteria = mock_location_reader.search.call_args.args[0]
        assert criteria.organization_id == 1
        assert criteria.limit == 1
        assert criteria.radius_km == pytest.approx(0.5 * 1.609344)
        assert criteria.with_total is False


class TestGetLocationQuery:
    """GetLocationQuery 테스트 (소프트 삭제 포함)."""

    async def test_not_found(
        self, mock_location_reader: AsyncMock, enricher: LocationEnricher
    ) -> None:
        query = GetLocationQuery(mock_location_reader, enricher)

        with pytest.raises(LocationNotFoundError):
            await query.execute(1)
        mock_location_reader.find_by_id.assert_awaited_once_with(1, include_deleted=False)

    async def test_deleted_location_visible_with_include_deleted(
        self,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        enricher: LocationEnricher,
        isbx: Location,
    ) -> None:
        deleted = replace(isbx, deleted=True)
        mock_location_reader.find_by_id.side_effect = lambda location_id, include_deleted=False: (
            deleted if include_deleted else None
        )
        holiday = HolidayOverride(date=date(2024, 12, 25), is_open=False, location_id=1)
        mock_hours_reader.list_holidays.return_value = {1: [holiday]}
        query = GetLocationQuery(mock_location_reader, enricher)

        with pytest.raises(LocationNotFoundError):
            await query.execute(1)
        result = await query.execute(1, include_deleted=True)

        assert result.location.deleted is True
        assert result.holidays == [holiday]
        mock_hours_reader.list_holidays.assert_awaited_with([1])


class TestCountLocationsQuery:
    async def test_empty_search_is_zero(self, mock_location_reader: AsyncMock) -> None:
        query = CountLocationsQuery(mock_location_reader)

        assert await query.execute(None) == 0
        assert await query.execute("   ") == 0
        mock_location_reader.count_matching.assert_not_called()

    async def test_count(self, mock_location_reader: AsyncMock) -> None:
        mock_location_reader.count_matching.return_value = 3

        assert await CountLocationsQuery(mock_location_reader).execute(" isbx ") == 3
        mock_location_reader.count_matching.assert_awaited_once_with("isbx")


class TestGetHoursTodayQuery:
    async def test_open_at_1pm(
        self,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        mock_organization_reader: AsyncMock,
        isbx: Location,
        monday_rule: HourRule,
    ) -> None:
        mock_location_reader.find_by_id.return_value = isbx
        mock_hours_reader.list_rules.return_value = {1: [monday_rule]}
        query = GetHoursTodayQuery(
            mock_location_reader, mock_hours_reader, mock_organization_reader
        )

        status = await query.execute(1, now=MONDAY_1PM_LA)

        assert status is not None and status.is_open is True
        # 영업시간 외 허용을 켜지 않은 위치는 조직을 조회하지 않음
        mock_organization_reader.find_by_id.assert_not_called()

    async def test_without_timezone_is_none(
        self,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        mock_organization_reader: AsyncMock,
        isbx: Location,
    ) -> None:
        mock_location_reader.find_by_id.return_value = replace(isbx, timezone=None)
        query = GetHoursTodayQuery(
            mock_location_reader, mock_hours_reader, mock_organization_reader
        )

        assert await query.execute(1, now=MONDAY_1PM_LA) is None
        mock_hours_reader.list_rules.assert_not_called()

    async def test_location_not_found(
        self,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        mock_organization_reader: AsyncMock,
    ) -> None:
        query = GetHoursTodayQuery(
            mock_location_reader, mock_hours_reader, mock_organization_reader
        )
        with pytest.raises(LocationNotFoundError):
            await query.execute(42)


class TestHoursQueries:
    async def test_location_hours_by_kind(
        self,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        isbx: Location,
        monday_rule: HourRule,
    ) -> None:
        mock_location_reader.find_by_id.return_value = isbx
        mock_hours_reader.list_rules.return_value = {1: [monday_rule]}

        query = GetLocationHoursQuery(mock_location_reader, mock_hours_reader, HourKind.DELIVERY)
        rules = await query.execute(1)

        assert rules == [monday_rule]
        mock_hours_reader.list_rules.assert_awaited_once_with([1], HourKind.DELIVERY)

    async def test_missing_location(
        self, mock_location_reader: AsyncMock, mock_hours_reader: AsyncMock
    ) -> None:
        with pytest.raises(LocationNotFoundError):
            await GetHolidaysQuery(mock_location_reader, mock_hours_reader).execute(1)

        slot_gateway = AsyncMock()
        with pytest.raises(LocationNotFoundError):
            await GetDeliveryTimeSlotsQuery(mock_location_reader, slot_gateway).execute(1)
        slot_gateway.list_slots.assert_not_called()


class TestProductQueries:
    """상품 목록/단건 Query 테스트."""

    @pytest.fixture
    def product_query(self) -> AsyncMock:
        gateway = AsyncMock()
        gateway.list_products = AsyncMock(return_value=([], 0))
        gateway.get_by_id = AsyncMock(return_value=None)
        return gateway

    async def test_default_order_is_name_then_id(self, product_query: AsyncMock) -> None:
        await ListProductsQuery(product_query).execute(search="  ", category="")

        params = product_query.list_products.call_args.args[0]
        assert params.location_id is None
        assert params.search is None
        assert params.category is None
        assert [spec.column for spec in params.order] == [
            ProductSortColumn.NAME,
            ProductSortColumn.ID,
        ]
        assert not params.include_hidden

    async def test_filters_are_passed_through(self, product_query: AsyncMock) -> None:
        await ListProductsQuery(product_query).execute(
            location_id=1,
            search=" blue ",
            include_all_stock=True,
            include_hidden=True,
            page=2,
            limit=10,
            order="category DESC",
        )

        params = product_query.list_products.call_args.args[0]
        assert params.location_id == 1
        assert params.search == "blue"
        assert params.include_all_stock
        assert params.include_hidden
        assert (params.page, params.limit) == (2, 10)
        assert params.order[0].column == ProductSortColumn.CATEGORY
        assert params.order[0].descending

    async def test_location_columns_are_not_product_columns(
        self, product_query: AsyncMock
    ) -> None:
        with pytest.raises(InvalidOrderError):
            await ListProductsQuery(product_query).execute(order="distance")
        product_query.list_products.assert_not_called()

    async def test_get_missing_product(self, product_query: AsyncMock) -> None:
        with pytest.raises(ProductNotFoundError):
            await GetProductQuery(product_query).execute(1, 21, include_hidden=True)
        product_query.get_by_id.assert_awaited_once_with(21, location_id=1, include_hidden=True)


class TestListingQueries:
    """쿠폰/할당 사용자/활성 딜 목록 Query 테스트."""

    async def test_coupons_strip_search(self) -> None:
        reader = AsyncMock()
        reader.list_for_location = AsyncMock(return_value=([], 0))

        await ListLocationCouponsQuery(reader).execute(1, search="   ", page=1, limit=5)

        reader.list_for_location.assert_awaited_once_with(1, search=None, page=1, limit=5)

    async def test_assigned_users(self) -> None:
        reader = AsyncMock()
        reader.list_for_location = AsyncMock(return_value=([], 0))

        await ListAssignedUsersQuery(reader).execute(1, search=" ana ")

        reader.list_for_location.assert_awaited_once_with(1, search="ana", page=0, limit=100)

    async def test_active_deals_order_accepts_camel_case(self) -> None:
        reader = AsyncMock()
        reader.list_locations = AsyncMock(return_value=([], 0))

        await ListActiveDealsCountQuery(reader).execute(
            assigned_user_id=4, order="orgActiveDealsCount DESC"
        )

        params = reader.list_locations.call_args.args[0]
        assert params.assigned_user_id == 4
        assert params.order[0].column == ActiveDealsSortColumn.ORG_ACTIVE_DEALS_COUNT
        assert params.order[0].descending

    async def test_active_deals_without_order(self) -> None:
        reader = AsyncMock()
        reader.list_locations = AsyncMock(return_value=([], 0))

        await ListActiveDealsCountQuery(reader).execute()

        assert reader.list_locations.call_args.args[0].order == ()

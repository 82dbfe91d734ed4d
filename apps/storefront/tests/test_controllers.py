"""HTTP Controllers 테스트."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from storefront.application.catalog.queries import GetProductQuery
from storefront.application.check_in.commands import CheckInInteractor
from storefront.application.check_in.ports import LatestCheckIn
from storefront.application.hours.commands import SaveLocationHoursInteractor
from storefront.application.listings.dto import LocationActiveDeals
from storefront.application.listings.queries import ListActiveDealsCountQuery
from storefront.application.reviews.commands import ReportReviewInteractor
from storefront.application.search.dto import LocationResultDTO
from storefront.application.search.queries import GetLocationQuery, SearchLocationsQuery
from storefront.application.search.services import LocationEnricher
from storefront.domain.entities import (
    Coupon,
    HourRule,
    Location,
    MobileCheckIn,
    Product,
    Review,
    ReviewReport,
    User,
)
from storefront.main import app
from storefront.presentation.http.errors.handlers import prefers_spanish
from storefront.setup import dependencies
from storefront.tests.conftest import ORIGIN_LAT, ORIGIN_LONG, serve_locations

API = "/api/v1/locations"


@pytest.fixture
def client() -> Iterator[TestClient]:
    """TestClient 인스턴스 (DI 오버라이드는 테스트마다 초기화)."""
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def search_query(
    mock_location_reader: AsyncMock,
    mock_hours_reader: AsyncMock,
    mock_organization_reader: AsyncMock,
) -> SearchLocationsQuery:
    enricher = LocationEnricher(mock_location_reader, mock_hours_reader, mock_organization_reader)
    return SearchLocationsQuery(mock_location_reader, enricher)


class TestPrefersSpanish:
    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            (None, False),
            ("", False),
            ("es", True),
            ("es-PR,en;q=0.8", True),
            ("*, es-MX", True),
            ("en-US,es;q=0.9", False),
            ("estonian", False),
        ],
    )
    def test_first_language_wins(self, header: str | None, expected: bool) -> None:
        assert prefers_spanish(header) is expected


class TestHealthController:
    """Health Controller 테스트."""

    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "storefront-api"

    def test_ping(self, client: TestClient) -> None:
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.text == "pong"


class TestLocationController:
    """Location Controller 테스트."""

    def test_search_returns_distance_ordered_page(
        self,
        client: TestClient,
        search_query: SearchLocationsQuery,
        mock_location_reader: AsyncMock,
        seeded_locations: list[Location],
    ) -> None:
        serve_locations(mock_location_reader, seeded_locations)
        app.dependency_overrides[dependencies.get_search_locations_query] = lambda: search_query

        response = client.get(
            API,
            params={"start_from_lat": ORIGIN_LAT, "start_from_long": ORIGIN_LONG, "limit": 4},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["total_count"] == 4
        assert [item["name"] for item in data["items"]] == [
            "ISBX",
            "CVS",
            "Burger King",
            "Westfield Century",
        ]
        assert data["items"][0]["long_lat"] == f"({ORIGIN_LONG},{ORIGIN_LAT})"
        assert data["items"][0]["distance"] == pytest.approx(0.0)

    def test_search_partial_origin_is_400(
        self, client: TestClient, search_query: SearchLocationsQuery
    ) -> None:
        app.dependency_overrides[dependencies.get_search_locations_query] = lambda: search_query

        response = client.get(API, params={"start_from_lat": ORIGIN_LAT})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_STARTING_COORDINATES"
        assert response.json()["detail"].startswith("Starting coordinates")

    def test_error_message_follows_accept_language(
        self, client: TestClient, search_query: SearchLocationsQuery
    ) -> None:
        app.dependency_overrides[dependencies.get_search_locations_query] = lambda: search_query

        response = client.get(
            API,
            params={"start_from_long": ORIGIN_LONG},
            headers={"Accept-Language": "es-PR,es;q=0.9"},
        )

        assert response.status_code == 400
        assert response.json()["detail"].startswith("Las coordenadas de inicio")

    def test_invalid_order_is_400(
        self, client: TestClient, search_query: SearchLocationsQuery
    ) -> None:
        app.dependency_overrides[dependencies.get_search_locations_query] = lambda: search_query

        response = client.get(API, params={"order": "name; DROP TABLE locations"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ORDER"

    def test_location_not_found(
        self,
        client: TestClient,
        mock_location_reader: AsyncMock,
        mock_hours_reader: AsyncMock,
        mock_organization_reader: AsyncMock,
    ) -> None:
        enricher = LocationEnricher(
            mock_location_reader, mock_hours_reader, mock_organization_reader
        )
        query = GetLocationQuery(mock_location_reader, enricher)
        app.dependency_overrides[dependencies.get_location_query] = lambda: query

        response = client.get(f"{API}/42", headers={"Accept-Language": "es"})

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Ubicación no encontrada.",
            "code": "LOCATION_NOT_FOUND",
        }

    def test_get_location(self, client: TestClient, isbx: Location) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(return_value=LocationResultDTO(location=isbx, holidays=[]))
        app.dependency_overrides[dependencies.get_location_query] = lambda: query

        response = client.get(f"{API}/1", params={"include_deleted": "true"})

        assert response.status_code == 200
        assert response.json()["name"] == "ISBX"
        assert response.json()["holidays"] == []
        query.execute.assert_awaited_once_with(1, include_deleted=True)

    def test_create_with_malformed_long_lat_is_400(self, client: TestClient) -> None:
        interactor = AsyncMock()
        app.dependency_overrides[dependencies.get_create_location_interactor] = lambda: interactor

        response = client.post(API, json={"name": "ISBX", "long_lat": "(abc,34.0)"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_COORDINATES"
        interactor.execute.assert_not_called()

    def test_create_passes_acting_user(self, client: TestClient, isbx: Location) -> None:
        interactor = AsyncMock()
        interactor.execute = AsyncMock(return_value=isbx)
        app.dependency_overrides[dependencies.get_create_location_interactor] = lambda: interactor

        response = client.post(
            API,
            json={"name": "ISBX", "long_lat": f"({ORIGIN_LONG},{ORIGIN_LAT})"},
            headers={"X-User-Id": "2", "X-User-Role": "admin"},
        )

        assert response.status_code == 201
        draft, acting_user = interactor.execute.call_args.args
        assert draft.coordinates.latitude == ORIGIN_LAT
        assert acting_user.user_id == 2
        assert acting_user.is_admin

    def test_update_with_null_long_lat_clears_coordinates(
        self, client: TestClient, isbx: Location
    ) -> None:
        interactor = AsyncMock()
        interactor.execute = AsyncMock(return_value=isbx)
        app.dependency_overrides[dependencies.get_update_location_interactor] = lambda: interactor

        cleared = client.put(f"{API}/1", json={"long_lat": None})
        renamed = client.put(f"{API}/1", json={"name": "ISBX HQ"})

        assert cleared.status_code == 200
        assert renamed.status_code == 200
        first, second = interactor.execute.call_args_list
        assert first.args[1].clear_coordinates is True
        assert first.args[1].provided() == {"coordinates": None}
        assert second.args[1].clear_coordinates is False
        assert second.args[1].provided() == {"name": "ISBX HQ"}

    def test_search_count(self, client: TestClient) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(return_value=2)
        app.dependency_overrides[dependencies.get_count_locations_query] = lambda: query

        response = client.get(f"{API}/search-count", params={"search": "isbx"})

        assert response.status_code == 200
        assert response.json() == {"count": 2}

    def test_delete_returns_204(self, client: TestClient) -> None:
        interactor = AsyncMock()
        app.dependency_overrides[dependencies.get_remove_location_interactor] = lambda: interactor

        response = client.delete(f"{API}/1")

        assert response.status_code == 204
        interactor.execute.assert_awaited_once()


class TestHoursController:
    """Hours Controller 테스트."""

    def test_invalid_time_range_is_400(
        self,
        client: TestClient,
        mock_location_reader: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        hours_command = AsyncMock()
        interactor = SaveLocationHoursInteractor(
            mock_location_reader, hours_command, mock_transaction_manager
        )
        app.dependency_overrides[dependencies.get_save_hours_interactor] = lambda: interactor

        response = client.put(
            f"{API}/1/hours",
            json=[{"day_of_week": 1, "is_open": True, "start_time": "18:00", "end_time": "09:00"}],
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TIME_RANGE"
        hours_command.upsert_rules.assert_not_called()

    def test_get_hours(self, client: TestClient, monday_rule: HourRule) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(return_value=[monday_rule])
        app.dependency_overrides[dependencies.get_location_hours_query] = lambda: query

        response = client.get(f"{API}/1/hours")

        assert response.status_code == 200
        assert response.json()[0]["day_of_week"] == 1


class TestReviewController:
    """Review Controller 테스트."""

    @pytest.fixture
    def interactor(self) -> AsyncMock:
        mock = AsyncMock()
        mock.execute = AsyncMock(
            return_value=Review(location_id=1, user_id=7, rating=4.5, id=11)
        )
        app.dependency_overrides[dependencies.get_create_review_interactor] = lambda: mock
        return mock

    def test_disable_interval_requires_admin(
        self, client: TestClient, interactor: AsyncMock
    ) -> None:
        response = client.post(
            f"{API}/1/reviews",
            json={"rating": 4.5, "disable_interval": True},
            headers={"X-User-Id": "7", "X-User-Role": "user"},
        )

        assert response.status_code == 403
        assert response.json()["code"] == "ADMIN_RIGHTS_REQUIRED"
        interactor.execute.assert_not_called()

    def test_site_admin_may_disable_interval(
        self, client: TestClient, interactor: AsyncMock
    ) -> None:
        response = client.post(
            f"{API}/1/reviews",
            json={"rating": 4.5, "disable_interval": True, "user_id": 7},
            headers={"X-User-Id": "3", "X-User-Role": "site_admin"},
        )

        assert response.status_code == 201
        assert response.json()["id"] == 11
        assert interactor.execute.call_args.kwargs["disable_interval"] is True
        assert interactor.execute.call_args.args[1] == 7

    def test_reviewer_is_required(self, client: TestClient, interactor: AsyncMock) -> None:
        response = client.post(f"{API}/1/reviews", json={"rating": 4})

        assert response.status_code == 400
        assert response.json()["code"] == "REVIEWER_REQUIRED"

    def test_report_review(self, client: TestClient) -> None:
        interactor = AsyncMock()
        interactor.execute = AsyncMock(
            return_value=ReviewReport(
                location_id=1, review_id=11, reported_by=7, reason="spam", id=3
            )
        )
        app.dependency_overrides[dependencies.get_report_review_interactor] = lambda: interactor

        response = client.post(
            f"{API}/1/reviews/11/report",
            json={"reason": "spam"},
            headers={"X-User-Id": "7"},
        )

        assert response.status_code == 201
        assert response.json()["id"] == 3
        location_id, review_id, acting_user = interactor.execute.call_args.args
        assert (location_id, review_id, acting_user.user_id) == (1, 11, 7)
        assert interactor.execute.call_args.kwargs["reason"] == "spam"

    def test_report_requires_user(
        self, client: TestClient, mock_transaction_manager: AsyncMock
    ) -> None:
        interactor = ReportReviewInteractor(AsyncMock(), AsyncMock(), mock_transaction_manager)
        app.dependency_overrides[dependencies.get_report_review_interactor] = lambda: interactor

        response = client.post(f"{API}/1/reviews/11/report")

        assert response.status_code == 400
        assert response.json()["code"] == "REPORTER_REQUIRED"
        mock_transaction_manager.commit.assert_not_called()


class TestCheckInController:
    """Mobile Check-In Controller 테스트."""

    def test_check_in_created(self, client: TestClient) -> None:
        interactor = AsyncMock()
        interactor.execute = AsyncMock(
            return_value=MobileCheckIn(location_id=1, mobile_number="3105550100", id=5)
        )
        app.dependency_overrides[dependencies.get_check_in_interactor] = lambda: interactor

        response = client.post(
            f"{API}/mobile-check-in", json={"location_id": 1, "mobile_number": "3105550100"}
        )

        assert response.status_code == 201
        assert response.json()["id"] == 5

    def test_second_check_in_same_day_is_409(
        self,
        client: TestClient,
        mock_location_reader: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        earlier = datetime.now(timezone.utc)
        check_in_query = AsyncMock()
        check_in_query.get_latest_by_mobile_number.return_value = LatestCheckIn(
            check_in=MobileCheckIn(location_id=1, mobile_number="3105550100", created=earlier),
            timezone="UTC",
        )
        interactor = CheckInInteractor(
            mock_location_reader, check_in_query, AsyncMock(), mock_transaction_manager
        )
        app.dependency_overrides[dependencies.get_check_in_interactor] = lambda: interactor

        response = client.post(
            f"{API}/mobile-check-in",
            json={"location_id": 1, "mobile_number": "3105550100"},
            headers={"Accept-Language": "es-PR"},
        )

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Ya te has registrado hoy.",
            "code": "CHECKIN_RESTRICTED",
        }

    def test_missing_mobile_number_is_400(
        self,
        client: TestClient,
        mock_location_reader: AsyncMock,
        mock_transaction_manager: AsyncMock,
    ) -> None:
        interactor = CheckInInteractor(
            mock_location_reader, AsyncMock(), AsyncMock(), mock_transaction_manager
        )
        app.dependency_overrides[dependencies.get_check_in_interactor] = lambda: interactor

        response = client.post(f"{API}/mobile-check-in", json={"location_id": 1})

        assert response.status_code == 400
        assert response.json()["code"] == "MOBILE_NUMBER_REQUIRED"


class TestProductController:
    """Product Controller 테스트."""

    @pytest.fixture
    def product(self) -> Product:
        return Product(location_id=1, name="Blue Dream", category="flower", id=21)

    def test_getallproducts_is_not_a_location_id(
        self, client: TestClient, product: Product
    ) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(return_value=([product], 1))
        app.dependency_overrides[dependencies.get_list_products_query] = lambda: query

        response = client.get(
            f"{API}/getallproducts",
            params={"search": "blue", "include_hidden": "true", "order": "name DESC"},
        )

        assert response.status_code == 200
        assert response.json()["total_count"] == 1
        assert response.json()["items"][0]["name"] == "Blue Dream"
        kwargs = query.execute.call_args.kwargs
        assert kwargs["location_id"] is None
        assert kwargs["include_hidden"] is True
        assert kwargs["order"] == "name DESC"

    def test_location_products(self, client: TestClient) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(return_value=([], 0))
        app.dependency_overrides[dependencies.get_list_products_query] = lambda: query

        response = client.get(f"{API}/1/products", params={"category": "edible"})

        assert response.status_code == 200
        assert query.execute.call_args.kwargs["location_id"] == 1
        assert query.execute.call_args.kwargs["category"] == "edible"

    def test_product_not_found(self, client: TestClient) -> None:
        gateway = AsyncMock()
        gateway.get_by_id = AsyncMock(return_value=None)
        query = GetProductQuery(gateway)
        app.dependency_overrides[dependencies.get_product_query] = lambda: query

        response = client.get(f"{API}/1/products/99", headers={"Accept-Language": "es"})

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Producto no encontrado.",
            "code": "PRODUCT_NOT_FOUND",
        }

    def test_create_passes_draft_and_user(self, client: TestClient, product: Product) -> None:
        interactor = AsyncMock()
        interactor.execute = AsyncMock(return_value=product)
        app.dependency_overrides[dependencies.get_create_product_interactor] = lambda: interactor

        response = client.post(
            f"{API}/1/products",
            json={"name": "Blue Dream", "category": "flower"},
            headers={"X-User-Id": "3", "X-User-Role": "site_admin"},
        )

        assert response.status_code == 201
        location_id, draft, acting_user = interactor.execute.call_args.args
        assert location_id == 1
        assert draft.name == "Blue Dream"
        assert acting_user.is_site_admin

    def test_update_sends_only_given_fields(self, client: TestClient, product: Product) -> None:
        interactor = AsyncMock()
        interactor.execute = AsyncMock(return_value=product)
        app.dependency_overrides[dependencies.get_update_product_interactor] = lambda: interactor

        response = client.put(f"{API}/1/products/21", json={"hidden": True})

        assert response.status_code == 200
        changes = interactor.execute.call_args.args[2]
        assert changes.provided() == {"hidden": True}

    def test_delete_returns_204(self, client: TestClient) -> None:
        interactor = AsyncMock()
        app.dependency_overrides[dependencies.get_remove_product_interactor] = lambda: interactor

        response = client.delete(f"{API}/1/products/21")

        assert response.status_code == 204
        assert interactor.execute.call_args.args[:2] == (1, 21)


class TestListingController:
    """쿠폰/할당 사용자/활성 딜 목록 Controller 테스트."""

    def test_active_deals_count(self, client: TestClient) -> None:
        row = LocationActiveDeals(
            id=1,
            name="ISBX",
            organization_id=1,
            organization_name="ISBX Foods",
            organization_max_active_deals=5,
            organization_active_deals_count=3,
        )
        query = AsyncMock()
        query.execute = AsyncMock(return_value=([row], 1))
        app.dependency_overrides[dependencies.get_active_deals_count_query] = lambda: query

        response = client.get(
            f"{API}/active-deals-count", params={"order": "org_active_deals_count DESC"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 1
        assert body["items"][0]["organization_active_deals_count"] == 3
        assert body["items"][0]["organization_max_active_deals"] == 5
        assert query.execute.call_args.kwargs["order"] == "org_active_deals_count DESC"

    def test_invalid_active_deals_order_is_400(self, client: TestClient) -> None:
        query = ListActiveDealsCountQuery(AsyncMock())
        app.dependency_overrides[dependencies.get_active_deals_count_query] = lambda: query

        response = client.get(f"{API}/active-deals-count", params={"order": "priority"})

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ORDER"

    def test_location_coupons(self, client: TestClient) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(return_value=([Coupon(id=8, name="10% off", code="TEN")], 1))
        app.dependency_overrides[dependencies.get_location_coupons_query] = lambda: query

        response = client.get(f"{API}/1/coupons", params={"search": "ten"})

        assert response.status_code == 200
        assert response.json()["items"][0]["code"] == "TEN"
        query.execute.assert_awaited_once_with(1, search="ten", page=0, limit=100)

    def test_assigned_users(self, client: TestClient) -> None:
        query = AsyncMock()
        query.execute = AsyncMock(
            return_value=([User(id=7, first_name="Ana", last_name="Rivera")], 1)
        )
        app.dependency_overrides[dependencies.get_assigned_users_query] = lambda: query

        response = client.get(f"{API}/1/users")

        assert response.status_code == 200
        assert response.json()["items"] == [
            {"id": 7, "first_name": "Ana", "last_name": "Rivera", "email": None}
        ]

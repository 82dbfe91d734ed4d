"""Domain Layer 단위 테스트."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from storefront.application.common.exceptions import ReviewSpamError
from storefront.domain.entities import MobileCheckIn
from storefront.domain.enums import ErrorKind
from storefront.domain.exceptions import InvalidCoordinatesError, LocationNotFoundError
from storefront.domain.value_objects import Coordinates


class TestCoordinates:
    """Coordinates Value Object 테스트."""

    def test_parse_valid_pair(self) -> None:
        coordinates = Coordinates.parse("(-66.1204234000000024,18.291058300000001)")
        assert coordinates.longitude == pytest.approx(-66.1204234)
        assert coordinates.latitude == pytest.approx(18.2910583)

    def test_parse_allows_whitespace(self) -> None:
        coordinates = Coordinates.parse(" (-118.42, 34.02) ")
        assert coordinates == Coordinates(longitude=-118.42, latitude=34.02)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "-118.42,34.02",
            "(-118.42,34.02",
            "(abc,34.02)",
            "(-118.42)",
            "(-181,0)",
            "(0,91)",
            "(nan,0)",
        ],
    )
    def test_parse_invalid_raises(self, text: str) -> None:
        with pytest.raises(InvalidCoordinatesError) as exc_info:
            Coordinates.parse(text)
        assert exc_info.value.message == "Invalid coordinates."

    def test_boundaries_are_inclusive(self) -> None:
        assert Coordinates.parse("(180,90)").longitude == 180
        assert Coordinates.parse("(-180,-90)").latitude == -90

    def test_try_parse_returns_none(self) -> None:
        assert Coordinates.try_parse(None) is None
        assert Coordinates.try_parse("(x,y)") is None
        assert Coordinates.try_parse("(200,0)") is None

    def test_to_long_lat(self) -> None:
        assert Coordinates(longitude=-118.5, latitude=34.25).to_long_lat() == "(-118.5,34.25)"

    def test_constructor_validates_range(self) -> None:
        with pytest.raises(InvalidCoordinatesError):
            Coordinates(longitude=0, latitude=-90.5)


class TestErrors:
    """예외 분류/메시지 테스트."""

    def test_error_kind_status_codes(self) -> None:
        assert ErrorKind.VALIDATION.status_code == 400
        assert ErrorKind.NOT_FOUND.status_code == 404
        assert ErrorKind.CONFLICT.status_code == 409
        assert ErrorKind.POLICY_DENIED.status_code == 403
        assert ErrorKind.INTERNAL.status_code == 500

    def test_location_not_found_has_spanish_message(self) -> None:
        error = LocationNotFoundError()
        assert error.kind == ErrorKind.NOT_FOUND
        assert error.localized["es-PR"] == "Ubicación no encontrada."

    def test_review_spam_uses_interval_in_messages(self) -> None:
        error = ReviewSpamError(30)
        assert error.message == "You can only leave 1 review per listing every 30 days."
        assert error.localized["es-PR"] == "Solo puedes dejar 1 opinión por listado cada 30 días."
        assert error.status_code == 400


class TestMobileCheckIn:
    def test_checked_in_at_prefers_modified(self) -> None:
        created = datetime(2024, 1, 1, tzinfo=timezone.utc)
        modified = datetime(2024, 1, 2, tzinfo=timezone.utc)
        check_in = MobileCheckIn(
            location_id=1, mobile_number="555", created=created, modified=modified
        )
        assert check_in.checked_in_at == modified

        only_created = MobileCheckIn(location_id=1, mobile_number="555", created=created)
        assert only_created.checked_in_at == created

"""Application Services 단위 테스트."""

from __future__ import annotations

import math
from datetime import date, datetime, time
from decimal import Decimal
from zoneinfo import ZoneInfo

import pytest

from storefront.application.common.exceptions import InvalidOrderError
from storefront.application.hours.dto import HourRuleInput, TimeSlotInput
from storefront.application.hours.services import HourRuleValidator, parse_time_of_day
from storefront.application.search.dto import LocationCriteria
from storefront.application.search.services import (
    GeoIndexService,
    HoursResolver,
    RankedRow,
    RatingAggregator,
    SearchOrderingService,
    SortSpec,
    parse_long_lat,
)
from storefront.application.search.services.geo_index import EARTH_RADIUS_M
from storefront.application.search.services.rating_aggregator import EMPTY_RATING
from storefront.domain.entities import HolidayOverride, HourRule, Location
from storefront.domain.enums import SortColumn, SortDirection
from storefront.domain.exceptions import (
    DuplicateDayOfWeekError,
    InvalidDayOfWeekError,
    InvalidTimeError,
    InvalidTimeRangeError,
)
from storefront.domain.value_objects import Coordinates
from storefront.tests.conftest import (
    LA_TIMEZONE,
    MONDAY,
    MONDAY_1157PM_LA,
    MONDAY_1PM_LA,
    ORIGIN_LAT,
    ORIGIN_LONG,
)


class TestGeoIndexService:
    """GeoIndexService 테스트."""

    def test_same_point_is_zero(self) -> None:
        assert GeoIndexService.distance_km(ORIGIN_LONG, ORIGIN_LAT, ORIGIN_LONG, ORIGIN_LAT) == 0

    def test_one_degree_of_latitude(self) -> None:
        expected = 2 * math.pi * EARTH_RADIUS_M / 360 / 1000
        assert GeoIndexService.distance_km(0, 0, 0, 1) == pytest.approx(expected, rel=1e-9)

    def test_missing_coordinate_returns_none(self) -> None:
        assert GeoIndexService.distance_km(None, 0, 0, 1) is None
        assert GeoIndexService.distance_km(0, 0, 0, None) is None
        assert GeoIndexService.distance_between(None, Coordinates(0, 0)) is None

    def test_distance_is_symmetric(self) -> None:
        a = Coordinates(longitude=-118.4241, latitude=34.0205)
        b = Coordinates(longitude=-73.9857, latitude=40.7484)
        assert GeoIndexService.distance_between(a, b) == pytest.approx(
            GeoIndexService.distance_between(b, a)
        )
        # LA ↔ NYC 약 3,940 km
        assert 3900 < GeoIndexService.distance_between(a, b) < 4000

    def test_bounding_box_is_inclusive(self) -> None:
        box = {"min_lon": -119.0, "min_lat": 33.0, "max_lon": -118.0, "max_lat": 34.0}
        assert GeoIndexService.within_bounding_box(Coordinates(-118.5, 33.5), **box)
        assert GeoIndexService.within_bounding_box(Coordinates(-118.0, 34.0), **box)
        assert not GeoIndexService.within_bounding_box(Coordinates(-117.9, 33.5), **box)
        assert not GeoIndexService.within_bounding_box(None, **box)

    def test_within_radius_miles(self) -> None:
        assert GeoIndexService.within_radius_miles(1.609344, 1.0)
        assert not GeoIndexService.within_radius_miles(1.61, 1.0)
        assert not GeoIndexService.within_radius_miles(None, 100.0)

    @pytest.mark.parametrize("text", [None, "", "(", "(1,2", "(a,b)", "(1,95)"])
    def test_parse_long_lat_never_raises(self, text: str | None) -> None:
        assert parse_long_lat(text) is None

    def test_parse_long_lat(self) -> None:
        assert parse_long_lat("(-118.5,34.1)") == Coordinates(longitude=-118.5, latitude=34.1)


class TestRatingAggregator:
    """RatingAggregator 테스트."""

    @pytest.mark.parametrize(
        ("mean", "expected"),
        [
            (4.25, 4.5),
            (4.2, 4.0),
            (4.74, 4.5),
            (4.75, 5.0),
            (Decimal("3.7500000000000000"), 4.0),
            (0, 0.0),
        ],
    )
    def test_round_half(self, mean, expected: float) -> None:
        assert RatingAggregator.round_half(mean) == expected

    def test_summarize_without_ratings(self) -> None:
        assert RatingAggregator.summarize(None, 0) == EMPTY_RATING

    def test_summarize(self) -> None:
        summary = RatingAggregator.summarize(Decimal("3.3333"), 3)
        assert summary.rating == 3.5
        assert summary.rating_count == 3


class TestHoursResolver:
    """HoursResolver 테스트 (America/Los_Angeles, 월요일 08:00 ~ 17:55)."""

    def test_day_of_week_starts_on_sunday(self) -> None:
        assert HoursResolver.day_of_week(date(2024, 1, 7)) == 0
        assert HoursResolver.day_of_week(date(2024, 1, 1)) == MONDAY
        assert HoursResolver.day_of_week(date(2024, 1, 6)) == 6

    def test_open_at_1pm_local(self, monday_rule: HourRule) -> None:
        status = HoursResolver.resolve([monday_rule], LA_TIMEZONE, now=MONDAY_1PM_LA)

        assert status is not None
        assert status.is_open is True
        assert status.opens_at == "08:00:00"
        assert status.closes_at == "17:55:00"
        assert status.is_off_hours is False

    def test_closed_at_1157pm_local(self, monday_rule: HourRule) -> None:
        status = HoursResolver.resolve([monday_rule], LA_TIMEZONE, now=MONDAY_1157PM_LA)

        assert status is not None
        assert status.is_open is False
        assert status.opens_at == "08:00:00"

    def test_naive_now_is_treated_as_utc(self, monday_rule: HourRule) -> None:
        naive = MONDAY_1PM_LA.replace(tzinfo=None)
        status = HoursResolver.resolve([monday_rule], LA_TIMEZONE, now=naive)
        assert status is not None and status.is_open

    @pytest.mark.parametrize("timezone_name", [None, "", "Mars/Olympus_Mons"])
    def test_missing_or_unknown_timezone_is_not_computed(
        self, monday_rule: HourRule, timezone_name: str | None
    ) -> None:
        assert HoursResolver.resolve([monday_rule], timezone_name, now=MONDAY_1PM_LA) is None

    def test_interval_is_half_open(self, monday_rule: HourRule) -> None:
        zone = ZoneInfo(LA_TIMEZONE)
        at_start = datetime(2024, 1, 1, 8, 0, tzinfo=zone)
        at_end = datetime(2024, 1, 1, 17, 55, tzinfo=zone)

        assert HoursResolver.resolve_at([monday_rule], at_start).is_open is True
        assert HoursResolver.resolve_at([monday_rule], at_end).is_open is False

    def test_missing_rule_is_closed(self) -> None:
        status = HoursResolver.resolve([], LA_TIMEZONE, now=MONDAY_1PM_LA)
        assert status is not None
        assert status.is_open is False
        assert status.opens_at is None

    def test_closed_holiday_overrides_weekly_rule(self, monday_rule: HourRule) -> None:
        holiday = HolidayOverride(date=date(2024, 1, 1), is_open=False, title="New Year")
        status = HoursResolver.resolve(
            [monday_rule], LA_TIMEZONE, holidays=[holiday], now=MONDAY_1PM_LA
        )
        assert status is not None and status.is_open is False

    def test_open_holiday_uses_its_own_hours(self, monday_rule: HourRule) -> None:
        holiday = HolidayOverride(
            date=date(2024, 1, 1), is_open=True, start_time=time(14, 0), end_time=time(16, 0)
        )
        status = HoursResolver.resolve(
            [monday_rule], LA_TIMEZONE, holidays=[holiday], now=MONDAY_1PM_LA
        )
        assert status is not None
        assert status.is_open is False
        assert status.opens_at == "14:00:00"

    def test_holiday_on_other_day_is_ignored(self, monday_rule: HourRule) -> None:
        holiday = HolidayOverride(date=date(2024, 1, 2), is_open=False)
        status = HoursResolver.resolve(
            [monday_rule], LA_TIMEZONE, holidays=[holiday], now=MONDAY_1PM_LA
        )
        assert status is not None and status.is_open is True

    def test_allow_off_hours_forces_open(self, monday_rule: HourRule) -> None:
        status = HoursResolver.resolve(
            [monday_rule], LA_TIMEZONE, now=MONDAY_1157PM_LA, allow_off_hours=True
        )
        assert status is not None
        assert status.is_open is True
        assert status.is_off_hours is True

    def test_delivery_open_while_store_closed_is_off_hours(self, monday_rule: HourRule) -> None:
        delivery_rule = HourRule(
            day_of_week=MONDAY, is_open=True, start_time=time(18, 0), end_time=time(23, 59)
        )
        status = HoursResolver.resolve_delivery(
            [delivery_rule], LA_TIMEZONE, regular_rules=[monday_rule], now=MONDAY_1157PM_LA
        )
        assert status is not None
        assert status.is_open is True
        assert status.is_off_hours is True
        assert status.opens_at == "06:00 PM"
        assert status.closes_at == "11:59 PM"

    def test_delivery_during_store_hours_is_not_off_hours(self, monday_rule: HourRule) -> None:
        delivery_rule = HourRule(
            day_of_week=MONDAY, is_open=True, start_time=time(9, 0), end_time=time(17, 0)
        )
        status = HoursResolver.resolve_delivery(
            [delivery_rule], LA_TIMEZONE, regular_rules=[monday_rule], now=MONDAY_1PM_LA
        )
        assert status is not None
        assert status.is_open is True
        assert status.is_off_hours is False

    def test_closed_holiday_closes_delivery(self) -> None:
        delivery_rule = HourRule(
            day_of_week=MONDAY, is_open=True, start_time=time(9, 0), end_time=time(17, 0)
        )
        holiday = HolidayOverride(date=date(2024, 1, 1), is_open=False)
        status = HoursResolver.resolve_delivery(
            [delivery_rule], LA_TIMEZONE, holidays=[holiday], now=MONDAY_1PM_LA
        )
        assert status is not None and status.is_open is False


class TestSearchOrderingService:
    """SearchOrderingService 테스트."""

    def test_parse_multiple_columns(self) -> None:
        specs = SearchOrderingService.parse("name ASC, priority DESC")
        assert specs == (
            SortSpec(SortColumn.NAME, SortDirection.ASC),
            SortSpec(SortColumn.PRIORITY, SortDirection.DESC),
        )

    def test_parse_accepts_camel_case_and_upper_case(self) -> None:
        assert SearchOrderingService.parse("ratingCount desc") == (
            SortSpec(SortColumn.RATING_COUNT, SortDirection.DESC),
        )
        assert SearchOrderingService.parse("NAME") == (SortSpec(SortColumn.NAME),)

    def test_parse_empty_returns_no_specs(self) -> None:
        assert SearchOrderingService.parse(None) == ()
        assert SearchOrderingService.parse("  ") == ()

    @pytest.mark.parametrize("raw", ["password ASC", "name UP", "name ASC extra", "1; DROP"])
    def test_parse_rejects_unknown(self, raw: str) -> None:
        with pytest.raises(InvalidOrderError):
            SearchOrderingService.parse(raw)

    def test_default_specs(self) -> None:
        with_origin = SearchOrderingService.default_specs(has_origin=True)
        without_origin = SearchOrderingService.default_specs(has_origin=False)

        assert [s.column for s in with_origin][:2] == [SortColumn.PRIORITY, SortColumn.DISTANCE]
        assert [s.column for s in without_origin][:2] == [SortColumn.PRIORITY, SortColumn.NAME]

    def test_needs_ratings(self) -> None:
        rating = LocationCriteria(order=SearchOrderingService.parse("ratingCount DESC"))
        name = LocationCriteria(order=SearchOrderingService.parse("name"))

        assert rating.needs_ratings
        assert not name.needs_ratings

    def test_rank_puts_nulls_last_in_both_directions(self) -> None:
        rows = [
            RankedRow(Location(id=1, name="a", priority=None)),
            RankedRow(Location(id=2, name="b", priority=2)),
            RankedRow(Location(id=3, name="c", priority=1)),
        ]

        ascending = SearchOrderingService.rank(rows, SearchOrderingService.parse("priority ASC"))
        descending = SearchOrderingService.rank(rows, SearchOrderingService.parse("priority DESC"))

        assert [r.location.id for r in ascending] == [3, 2, 1]
        assert [r.location.id for r in descending] == [2, 3, 1]

    def test_rank_text_is_case_insensitive(self) -> None:
        rows = [
            RankedRow(Location(id=1, name="beta")),
            RankedRow(Location(id=2, name="Alpha")),
            RankedRow(Location(id=3, name="alpha")),
        ]
        ranked = SearchOrderingService.rank(rows, SearchOrderingService.parse("name ASC, id DESC"))
        assert [r.location.id for r in ranked] == [3, 2, 1]


class TestHourRuleValidator:
    """HourRuleValidator 테스트."""

    def test_parse_time_formats(self) -> None:
        assert parse_time_of_day("08:00") == time(8, 0)
        assert parse_time_of_day("17:55:30") == time(17, 55, 30)
        assert parse_time_of_day("06:00 PM") == time(18, 0)

    def test_parse_time_invalid(self) -> None:
        with pytest.raises(InvalidTimeError):
            parse_time_of_day("25:00")

    def test_validate_rules(self) -> None:
        rules = HourRuleValidator.validate_rules(
            7,
            [
                HourRuleInput(day_of_week=1, is_open=True, start_time="08:00", end_time="17:55"),
                HourRuleInput(day_of_week=0, is_open=False),
            ],
        )
        assert rules[0] == HourRule(
            day_of_week=1,
            is_open=True,
            start_time=time(8, 0),
            end_time=time(17, 55),
            location_id=7,
        )
        assert rules[1].is_open is False
        assert rules[1].start_time is None

    def test_open_rule_requires_times(self) -> None:
        with pytest.raises(InvalidTimeError):
            HourRuleValidator.validate_rules(1, [HourRuleInput(day_of_week=1, is_open=True)])

    def test_start_must_precede_end(self) -> None:
        with pytest.raises(InvalidTimeRangeError):
            HourRuleValidator.validate_rules(
                1,
                [HourRuleInput(day_of_week=1, is_open=True, start_time="18:00", end_time="08:00")],
            )

    def test_day_of_week_range(self) -> None:
        with pytest.raises(InvalidDayOfWeekError):
            HourRuleValidator.validate_rules(1, [HourRuleInput(day_of_week=7, is_open=False)])

    def test_duplicate_day(self) -> None:
        with pytest.raises(DuplicateDayOfWeekError):
            HourRuleValidator.validate_rules(
                1,
                [
                    HourRuleInput(day_of_week=2, is_open=False),
                    HourRuleInput(day_of_week=2, is_open=False),
                ],
            )

    def test_validate_slots(self) -> None:
        slots = HourRuleValidator.validate_slots(
            3,
            [TimeSlotInput(day="Monday", day_num=1, time_slot=" 10:00 AM ", max_orders_per_hour=5)],
        )
        assert slots[0].time_slot == "10:00 AM"
        assert slots[0].location_id == 3

"""Search Queries."""

from storefront.application.search.queries.count_locations import CountLocationsQuery
from storefront.application.search.queries.get_hours_today import GetHoursTodayQuery
from storefront.application.search.queries.get_location import GetLocationQuery
from storefront.application.search.queries.get_nearest_location import (
    DEFAULT_NEAREST_MILE_RADIUS,
    GetNearestLocationQuery,
)
from storefront.application.search.queries.search_locations import SearchLocationsQuery

__all__ = [
    "DEFAULT_NEAREST_MILE_RADIUS",
    "CountLocationsQuery",
    "GetHoursTodayQuery",
    "GetLocationQuery",
    "GetNearestLocationQuery",
    "SearchLocationsQuery",
]

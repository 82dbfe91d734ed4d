"""Search DTOs."""

from storefront.application.search.dto.location_page import LocationHit, LocationPage
from storefront.application.search.dto.location_result import (
    HoursTodayDTO,
    LocationResultDTO,
    LocationSearchResultDTO,
)
from storefront.application.search.dto.search_params import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    BoundingBox,
    LocationCriteria,
    LocationSearchParams,
    SortSpec,
)

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "BoundingBox",
    "HoursTodayDTO",
    "LocationCriteria",
    "LocationHit",
    "LocationPage",
    "LocationResultDTO",
    "LocationSearchParams",
    "LocationSearchResultDTO",
    "SortSpec",
]

"""Search Services (순수 로직)."""

from storefront.application.search.services.geo_index import GeoIndexService, parse_long_lat
from storefront.application.search.services.hours_resolver import (
    DELIVERY_TIME_FORMAT,
    REGULAR_TIME_FORMAT,
    HoursResolver,
)
from storefront.application.search.services.location_enricher import LocationEnricher
from storefront.application.search.services.rating_aggregator import (
    RatingAggregator,
    RatingSummary,
)
from storefront.application.search.services.search_ordering import (
    RankedRow,
    SearchOrderingService,
    SortSpec,
)

__all__ = [
    "DELIVERY_TIME_FORMAT",
    "REGULAR_TIME_FORMAT",
    "GeoIndexService",
    "HoursResolver",
    "LocationEnricher",
    "RankedRow",
    "RatingAggregator",
    "RatingSummary",
    "SearchOrderingService",
    "SortSpec",
    "parse_long_lat",
]

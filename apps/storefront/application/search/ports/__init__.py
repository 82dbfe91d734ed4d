"""Search Ports."""

from storefront.application.search.ports.hours_reader import HoursReader
from storefront.application.search.ports.location_reader import LocationReader, RatingStats
from storefront.application.search.ports.organization_reader import OrganizationReader

__all__ = ["HoursReader", "LocationReader", "OrganizationReader", "RatingStats"]

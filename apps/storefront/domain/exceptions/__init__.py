"""Domain Exceptions."""

from storefront.domain.exceptions.base import DomainError
from storefront.domain.exceptions.hours import (
    DuplicateDayOfWeekError,
    InvalidDayOfWeekError,
    InvalidTimeError,
    InvalidTimeRangeError,
)
from storefront.domain.exceptions.location import InvalidCoordinatesError, LocationNotFoundError
from storefront.domain.exceptions.review import InvalidRatingError

__all__ = [
    "DomainError",
    "DuplicateDayOfWeekError",
    "InvalidCoordinatesError",
    "InvalidDayOfWeekError",
    "InvalidRatingError",
    "InvalidTimeError",
    "InvalidTimeRangeError",
    "LocationNotFoundError",
]

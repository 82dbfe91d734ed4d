"""Storefront Domain Layer."""

from storefront.domain.entities import Location, Organization
from storefront.domain.enums import ErrorKind, SortColumn, SortDirection
from storefront.domain.value_objects import Coordinates

__all__ = [
    "Coordinates",
    "ErrorKind",
    "Location",
    "Organization",
    "SortColumn",
    "SortDirection",
]

"""Domain Enums."""

from storefront.domain.enums.error_kind import ErrorKind
from storefront.domain.enums.hour_kind import HourKind
from storefront.domain.enums.sort import (
    ActiveDealsSortColumn,
    ProductSortColumn,
    SortColumn,
    SortDirection,
)
from storefront.domain.enums.user_role import UserRole

__all__ = [
    "ActiveDealsSortColumn",
    "ErrorKind",
    "HourKind",
    "ProductSortColumn",
    "SortColumn",
    "SortDirection",
    "UserRole",
]

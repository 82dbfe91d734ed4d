"""Listings Queries."""

from storefront.application.listings.queries.list_active_deals import ListActiveDealsCountQuery
from storefront.application.listings.queries.list_location_relations import (
    ListAssignedUsersQuery,
    ListLocationCouponsQuery,
)

__all__ = ["ListActiveDealsCountQuery", "ListAssignedUsersQuery", "ListLocationCouponsQuery"]

"""Listings DTOs."""

from storefront.application.listings.dto.active_deals import (
    ActiveDealsParams,
    LocationActiveDeals,
)

__all__ = ["ActiveDealsParams", "LocationActiveDeals"]

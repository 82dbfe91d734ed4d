"""Listings Ports."""

from storefront.application.listings.ports.listing_readers import (
    ActiveDealsReader,
    AssignedUserReader,
    CouponReader,
)

__all__ = ["ActiveDealsReader", "AssignedUserReader", "CouponReader"]

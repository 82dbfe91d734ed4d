"""HTTP Controllers."""

from storefront.presentation.http.controllers.check_ins import router as check_in_router
from storefront.presentation.http.controllers.health import router as health_router
from storefront.presentation.http.controllers.hours import router as hours_router
from storefront.presentation.http.controllers.listings import router as listing_router
from storefront.presentation.http.controllers.locations import router as location_router
from storefront.presentation.http.controllers.products import router as product_router
from storefront.presentation.http.controllers.reviews import router as review_router

__all__ = [
    "check_in_router",
    "health_router",
    "hours_router",
    "listing_router",
    "location_router",
    "product_router",
    "review_router",
]

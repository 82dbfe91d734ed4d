"""Domain Entities."""

from storefront.domain.entities.check_in import MobileCheckIn
from storefront.domain.entities.coupon import Coupon
from storefront.domain.entities.hours import DeliveryTimeSlot, HolidayOverride, HourRule
from storefront.domain.entities.location import Location, Organization
from storefront.domain.entities.product import Product
from storefront.domain.entities.review import Review, ReviewReport
from storefront.domain.entities.user import User

__all__ = [
    "Coupon",
    "DeliveryTimeSlot",
    "HolidayOverride",
    "HourRule",
    "Location",
    "MobileCheckIn",
    "Organization",
    "Product",
    "Review",
    "ReviewReport",
    "User",
]

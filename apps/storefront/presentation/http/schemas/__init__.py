"""HTTP Schemas."""

from storefront.presentation.http.schemas.check_in import CheckInRequest, CheckInResponse
from storefront.presentation.http.schemas.hours import (
    HourRuleRequest,
    TimeSlotRequest,
    TimeSlotResponse,
)
from storefront.presentation.http.schemas.listings import (
    ActiveDealsListResponse,
    ActiveDealsResponse,
    AssignedUserListResponse,
    AssignedUserResponse,
    CouponListResponse,
    CouponResponse,
)
from storefront.presentation.http.schemas.location import (
    HolidayResponse,
    HourRuleResponse,
    HoursTodayResponse,
    LocationCountResponse,
    LocationCreateRequest,
    LocationResponse,
    LocationSearchResponse,
    LocationUpdateRequest,
    OffHoursRequest,
    OffHoursResponse,
)
from storefront.presentation.http.schemas.product import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront.presentation.http.schemas.review import (
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewReportRequest,
    ReviewReportResponse,
    ReviewResponse,
    ReviewUpdateRequest,
)

__all__ = [
    "ActiveDealsListResponse",
    "ActiveDealsResponse",
    "AssignedUserListResponse",
    "AssignedUserResponse",
    "CheckInRequest",
    "CheckInResponse",
    "CouponListResponse",
    "CouponResponse",
    "HolidayResponse",
    "HourRuleRequest",
    "HourRuleResponse",
    "HoursTodayResponse",
    "LocationCountResponse",
    "LocationCreateRequest",
    "LocationResponse",
    "LocationSearchResponse",
    "LocationUpdateRequest",
    "OffHoursRequest",
    "OffHoursResponse",
    "ProductCreateRequest",
    "ProductListResponse",
    "ProductResponse",
    "ProductUpdateRequest",
    "ReviewCreateRequest",
    "ReviewListResponse",
    "ReviewReportRequest",
    "ReviewReportResponse",
    "ReviewResponse",
    "ReviewUpdateRequest",
    "TimeSlotRequest",
    "TimeSlotResponse",
]

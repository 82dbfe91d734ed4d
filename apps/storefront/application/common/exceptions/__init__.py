"""Application Exceptions."""

from storefront.application.common.exceptions.base import ApplicationError
from storefront.application.common.exceptions.check_in import (
    CheckInNotFoundError,
    CheckInRestrictedError,
    MobileNumberRequiredError,
)
from storefront.application.common.exceptions.location import (
    AdminRightsRequiredError,
    LocationNotAssignedError,
    NoChangesProvidedError,
    OffHoursDisabledError,
    OrganizationNotFoundError,
    TimezoneLookupError,
)
from storefront.application.common.exceptions.product import ProductNotFoundError
from storefront.application.common.exceptions.review import (
    ReporterRequiredError,
    ReviewerRequiredError,
    ReviewNotFoundError,
    ReviewSpamError,
)
from storefront.application.common.exceptions.search import (
    InvalidOrderError,
    InvalidStartingCoordinatesError,
    NearestLocationNotFoundError,
    StartingLocationRequiredError,
)

__all__ = [
    "AdminRightsRequiredError",
    "ApplicationError",
    "CheckInNotFoundError",
    "CheckInRestrictedError",
    "InvalidOrderError",
    "InvalidStartingCoordinatesError",
    "LocationNotAssignedError",
    "MobileNumberRequiredError",
    "NearestLocationNotFoundError",
    "NoChangesProvidedError",
    "OffHoursDisabledError",
    "OrganizationNotFoundError",
    "ProductNotFoundError",
    "ReporterRequiredError",
    "ReviewNotFoundError",
    "ReviewerRequiredError",
    "ReviewSpamError",
    "StartingLocationRequiredError",
    "TimezoneLookupError",
]

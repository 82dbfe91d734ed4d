"""Hours Queries."""

from storefront.application.hours.queries.get_location_hours import (
    GetDeliveryTimeSlotsQuery,
    GetHolidaysQuery,
    GetLocationHoursQuery,
)

__all__ = ["GetDeliveryTimeSlotsQuery", "GetHolidaysQuery", "GetLocationHoursQuery"]

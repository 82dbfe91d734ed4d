"""Hours Commands."""

from storefront.application.hours.commands.save_delivery_time_slots import (
    SaveDeliveryTimeSlotsInteractor,
)
from storefront.application.hours.commands.save_location_hours import SaveLocationHoursInteractor

__all__ = ["SaveDeliveryTimeSlotsInteractor", "SaveLocationHoursInteractor"]

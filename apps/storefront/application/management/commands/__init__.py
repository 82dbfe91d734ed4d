"""Management Commands."""

from storefront.application.management.commands.create_location import CreateLocationInteractor
from storefront.application.management.commands.remove_location import RemoveLocationInteractor
from storefront.application.management.commands.update_location import UpdateLocationInteractor
from storefront.application.management.commands.update_off_hours import UpdateOffHoursInteractor

__all__ = [
    "CreateLocationInteractor",
    "RemoveLocationInteractor",
    "UpdateLocationInteractor",
    "UpdateOffHoursInteractor",
]

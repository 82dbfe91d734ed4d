"""Management Ports."""

from storefront.application.management.ports.location_command_gateway import (
    LocationCommandGateway,
)
from storefront.application.management.ports.timezone_lookup import TimezoneLookupPort

__all__ = ["LocationCommandGateway", "TimezoneLookupPort"]

"""Check-In Ports."""

from storefront.application.check_in.ports.check_in_gateway import (
    CheckInCommandGateway,
    CheckInQueryGateway,
    LatestCheckIn,
)

__all__ = ["CheckInCommandGateway", "CheckInQueryGateway", "LatestCheckIn"]

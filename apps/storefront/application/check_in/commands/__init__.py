"""Check-In Commands."""

from storefront.application.check_in.commands.check_in import CheckInInteractor

__all__ = ["CheckInInteractor"]

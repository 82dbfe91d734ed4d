"""Check-In Queries."""

from storefront.application.check_in.queries.get_check_in import GetCheckInQuery

__all__ = ["GetCheckInQuery"]

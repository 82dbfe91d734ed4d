"""Management DTOs."""

from storefront.application.management.dto.location_draft import LocationChanges, LocationDraft

__all__ = ["LocationChanges", "LocationDraft"]

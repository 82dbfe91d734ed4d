"""Domain Value Objects."""

from storefront.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]

"""Google Maps Integration."""

from storefront.infrastructure.integrations.google.timezone_client import (
    GoogleTimezoneHttpClient,
)

__all__ = ["GoogleTimezoneHttpClient"]

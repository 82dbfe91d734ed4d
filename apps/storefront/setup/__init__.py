"""Setup Module."""

from storefront.setup.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]

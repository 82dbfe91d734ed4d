"""Storefront Infrastructure Layer."""

"""Storefront Application Layer."""

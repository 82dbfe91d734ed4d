"""Storefront Location Service."""

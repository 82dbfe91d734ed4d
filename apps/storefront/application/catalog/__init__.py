"""Catalog (Products) Application Layer."""

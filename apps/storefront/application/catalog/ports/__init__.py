"""Catalog Ports."""

from storefront.application.catalog.ports.product_gateway import (
    ProductCommandGateway,
    ProductQueryGateway,
)

__all__ = ["ProductCommandGateway", "ProductQueryGateway"]

"""Catalog Queries."""

from storefront.application.catalog.queries.list_products import (
    GetProductQuery,
    ListProductsQuery,
)

__all__ = ["GetProductQuery", "ListProductsQuery"]

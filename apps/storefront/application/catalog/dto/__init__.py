"""Catalog DTOs."""

from storefront.application.catalog.dto.product_params import (
    ProductChanges,
    ProductDraft,
    ProductSearchParams,
)

__all__ = ["ProductChanges", "ProductDraft", "ProductSearchParams"]

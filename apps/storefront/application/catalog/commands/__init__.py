"""Catalog Commands."""

from storefront.application.catalog.commands.create_product import CreateProductInteractor
from storefront.application.catalog.commands.remove_product import RemoveProductInteractor
from storefront.application.catalog.commands.update_product import UpdateProductInteractor

__all__ = ["CreateProductInteractor", "RemoveProductInteractor", "UpdateProductInteractor"]

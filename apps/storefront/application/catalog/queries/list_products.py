"""Product queries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.application.catalog.dto import ProductSearchParams
from storefront.application.common.exceptions import ProductNotFoundError
from storefront.application.search.dto import SortSpec
from storefront.application.search.services import SearchOrderingService
from storefront.domain.enums import ProductSortColumn

if TYPE_CHECKING:
    from storefront.application.catalog.ports import ProductQueryGateway
    from storefront.domain.entities import Product

logger = logging.getLogger(__name__)

DEFAULT_PRODUCT_ORDER = (SortSpec(ProductSortColumn.NAME), SortSpec(ProductSortColumn.ID))


class ListProductsQuery:
    """상품 목록 Query.

    location_id가 없으면 전체 위치(getallproducts), 있으면 해당 위치의 상품입니다.
    정렬 기본값은 name → id 입니다.
    """

    def __init__(self, product_query: "ProductQueryGateway") -> None:
        self._product_query = product_query

    async def execute(
        self,
        location_id: int | None = None,
        search: str | None = None,
        category: str | None = None,
        include_all_stock: bool = False,
        include_hidden: bool = False,
        include_deleted: bool = False,
        page: int = 0,
        limit: int = 100,
        order: str | None = None,
    ) -> tuple[list["Product"], int]:
        """
        Raises:
            InvalidOrderError: 허용되지 않은 정렬 표현식
        """
        specs = SearchOrderingService.parse(order, ProductSortColumn) or DEFAULT_PRODUCT_ORDER
        params = ProductSearchParams(
            location_id=location_id,
            search=search.strip() if search and search.strip() else None,
            category=category or None,
            include_all_stock=include_all_stock,
            include_hidden=include_hidden,
            include_deleted=include_deleted,
            page=page,
            limit=limit,
            order=specs,
        )
        items, total = await self._product_query.list_products(params)
        logger.info(
            "Products listed",
            extra={"location_id": location_id, "results_count": len(items), "total_count": total},
        )
        return items, total


class GetProductQuery:
    """위치의 상품 단건 조회 Query."""

    def __init__(self, product_query: "ProductQueryGateway") -> None:
        self._product_query = product_query

    async def execute(
        self, location_id: int, product_id: int, include_hidden: bool = False
    ) -> "Product":
        product = await self._product_query.get_by_id(
            product_id, location_id=location_id, include_hidden=include_hidden
        )
        if product is None:
            raise ProductNotFoundError()
        return product

"""Product gateway ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.application.catalog.dto import ProductSearchParams
    from storefront.domain.entities import Product


class ProductQueryGateway(Protocol):
    """상품 조회 포트."""

    async def list_products(self, params: ProductSearchParams) -> tuple[list[Product], int]:
        """필터/정렬/페이지가 적용된 상품 목록과 전체 개수를 반환합니다."""
        ...

    async def get_by_id(
        self,
        product_id: int,
        location_id: int | None = None,
        include_hidden: bool = False,
    ) -> Product | None:
        """삭제되지 않은 상품을 조회합니다. location_id가 주어지면 해당 위치로 한정합니다."""
        ...


class ProductCommandGateway(Protocol):
    """상품 수정 포트."""

    async def create(self, product: Product) -> Product:
        ...

    async def update(self, product: Product) -> Product:
        ...

    async def soft_delete(self, product_id: int, modified_by: int | None = None) -> None:
        ...

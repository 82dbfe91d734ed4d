"""Product DTOs."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

from storefront.application.search.dto import SortSpec
from storefront.domain.entities import Product

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 100


@dataclass(frozen=True)
class ProductSearchParams:
    """상품 목록 요청 DTO.

    location_id가 없으면 전체 위치의 상품을 조회합니다.
    기본값으로 재고 없음, 숨김, 삭제된 상품은 제외합니다.
    """

    location_id: int | None = None
    search: str | None = None
    category: str | None = None
    include_all_stock: bool = False
    include_hidden: bool = False
    include_deleted: bool = False
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    order: tuple[SortSpec, ...] = ()


@dataclass(frozen=True)
class ProductDraft:
    """상품 생성 요청."""

    name: str
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    is_in_stock: bool = True
    hidden: bool = False
    strain_id: int | None = None
    strain_name: str | None = None

    def to_product(
        self, location_id: int, created_by: int | None = None, now: datetime | None = None
    ) -> Product:
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return Product(
            location_id=location_id,
            created=now,
            modified=now,
            created_by=created_by,
            modified_by=created_by,
            **values,
        )


@dataclass(frozen=True)
class ProductChanges:
    """상품 수정 요청. None인 필드는 변경하지 않습니다."""

    name: str | None = None
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    is_in_stock: bool | None = None
    hidden: bool | None = None
    strain_id: int | None = None
    strain_name: str | None = None

    def provided(self) -> dict[str, Any]:
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return {name: value for name, value in values.items() if value is not None}

    def has_changes(self) -> bool:
        return bool(self.provided())

    def apply(
        self, product: Product, modified_by: int | None = None, now: datetime | None = None
    ) -> Product:
        return replace(product, modified=now, modified_by=modified_by, **self.provided())

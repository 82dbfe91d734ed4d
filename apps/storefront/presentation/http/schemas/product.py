"""Product HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.application.catalog.dto import ProductChanges, ProductDraft
from storefront.domain.entities import Product


class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(None, max_length=64)
    subcategory: str | None = Field(None, max_length=64)
    is_in_stock: bool = True
    hidden: bool = False
    strain_id: int | None = None
    strain_name: str | None = Field(None, max_length=255)

    def to_draft(self) -> ProductDraft:
        return ProductDraft(**self.model_dump())


class ProductUpdateRequest(BaseModel):
    """상품 수정 요청 스키마. 주어진 필드만 변경합니다."""

    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    category: str | None = Field(None, max_length=64)
    subcategory: str | None = Field(None, max_length=64)
    is_in_stock: bool | None = None
    hidden: bool | None = None
    strain_id: int | None = None
    strain_name: str | None = Field(None, max_length=255)

    def to_changes(self) -> ProductChanges:
        return ProductChanges(**self.model_dump())


class ProductResponse(BaseModel):
    id: int | None
    location_id: int
    name: str
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    is_in_stock: bool = True
    hidden: bool = False
    strain_id: int | None = None
    strain_name: str | None = None
    deleted: bool = False
    created: datetime | None = None
    modified: datetime | None = None

    @classmethod
    def from_entity(cls, product: Product) -> ProductResponse:
        return cls(
            id=product.id,
            location_id=product.location_id,
            name=product.name,
            description=product.description,
            category=product.category,
            subcategory=product.subcategory,
            is_in_stock=product.is_in_stock,
            hidden=product.hidden,
            strain_id=product.strain_id,
            strain_name=product.strain_name,
            deleted=product.deleted,
            created=product.created,
            modified=product.modified,
        )


class ProductListResponse(BaseModel):
    items: list[ProductResponse]
    total_count: int

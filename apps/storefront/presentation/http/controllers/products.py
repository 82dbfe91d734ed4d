"""Product Controller.

`/locations/getallproducts`는 `/locations/{location_id}` 보다 먼저 등록되어야 합니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from storefront.application.catalog.commands import (
    CreateProductInteractor,
    RemoveProductInteractor,
    UpdateProductInteractor,
)
from storefront.application.catalog.queries import GetProductQuery, ListProductsQuery
from storefront.application.common.dto import ActingUser
from storefront.presentation.http.schemas import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront.setup.dependencies import (
    get_acting_user,
    get_create_product_interactor,
    get_list_products_query,
    get_product_query,
    get_remove_product_interactor,
    get_update_product_interactor,
)

router = APIRouter(prefix="/locations", tags=["products"])


async def _list(
    query: ListProductsQuery,
    location_id: int | None,
    search: str | None,
    category: str | None,
    include_all_stock: bool,
    include_hidden: bool,
    include_deleted: bool,
    page: int,
    limit: int,
    order: str | None,
) -> ProductListResponse:
    items, total = await query.execute(
        location_id=location_id,
        search=search,
        category=category,
        include_all_stock=include_all_stock,
        include_hidden=include_hidden,
        include_deleted=include_deleted,
        page=page,
        limit=limit,
        order=order,
    )
    return ProductListResponse(
        items=[ProductResponse.from_entity(item) for item in items],
        total_count=total,
    )


@router.get("/getallproducts", response_model=ProductListResponse)
async def list_all_products(
    query: Annotated[ListProductsQuery, Depends(get_list_products_query)],
    search: str | None = Query(None, max_length=255),
    category: str | None = Query(None, max_length=64),
    include_all_stock: bool = Query(False),
    include_hidden: bool = Query(False),
    include_deleted: bool = Query(False),
    page: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    order: str | None = Query(None, description="예: `name ASC, created DESC`"),
) -> ProductListResponse:
    """전체 위치의 상품 목록."""
    return await _list(
        query,
        None,
        search,
        category,
        include_all_stock,
        include_hidden,
        include_deleted,
        page,
        limit,
        order,
    )


@router.get("/{location_id}/products", response_model=ProductListResponse)
async def list_location_products(
    location_id: int,
    query: Annotated[ListProductsQuery, Depends(get_list_products_query)],
    search: str | None = Query(None, max_length=255),
    category: str | None = Query(None, max_length=64),
    include_all_stock: bool = Query(False),
    include_hidden: bool = Query(False),
    include_deleted: bool = Query(False),
    page: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    order: str | None = Query(None),
) -> ProductListResponse:
    return await _list(
        query,
        location_id,
        search,
        category,
        include_all_stock,
        include_hidden,
        include_deleted,
        page,
        limit,
        order,
    )


@router.post(
    "/{location_id}/products",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    location_id: int,
    body: ProductCreateRequest,
    interactor: Annotated[CreateProductInteractor, Depends(get_create_product_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> ProductResponse:
    product = await interactor.execute(location_id, body.to_draft(), acting_user)
    return ProductResponse.from_entity(product)


@router.get("/{location_id}/products/{product_id}", response_model=ProductResponse)
async def get_product(
    location_id: int,
    product_id: int,
    query: Annotated[GetProductQuery, Depends(get_product_query)],
    include_hidden: bool = Query(False),
) -> ProductResponse:
    product = await query.execute(location_id, product_id, include_hidden=include_hidden)
    return ProductResponse.from_entity(product)


@router.put("/{location_id}/products/{product_id}", response_model=ProductResponse)
async def update_product(
    location_id: int,
    product_id: int,
    body: ProductUpdateRequest,
    interactor: Annotated[UpdateProductInteractor, Depends(get_update_product_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> ProductResponse:
    product = await interactor.execute(location_id, product_id, body.to_changes(), acting_user)
    return ProductResponse.from_entity(product)


@router.delete("/{location_id}/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_product(
    location_id: int,
    product_id: int,
    interactor: Annotated[RemoveProductInteractor, Depends(get_remove_product_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> None:
    await interactor.execute(location_id, product_id, acting_user)

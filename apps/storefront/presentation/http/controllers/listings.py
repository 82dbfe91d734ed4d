"""Listing Controller (위치 쿠폰, 할당 사용자, 활성 딜 집계).

`/locations/active-deals-count`는 `/locations/{location_id}` 보다 먼저 등록되어야 합니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from storefront.application.listings.queries import (
    ListActiveDealsCountQuery,
    ListAssignedUsersQuery,
    ListLocationCouponsQuery,
)
from storefront.presentation.http.schemas import (
    ActiveDealsListResponse,
    ActiveDealsResponse,
    AssignedUserListResponse,
    AssignedUserResponse,
    CouponListResponse,
    CouponResponse,
)
from storefront.setup.dependencies import (
    get_active_deals_count_query,
    get_assigned_users_query,
    get_location_coupons_query,
)

router = APIRouter(prefix="/locations", tags=["listings"])


@router.get("/active-deals-count", response_model=ActiveDealsListResponse)
async def list_active_deals_count(
    query: Annotated[ListActiveDealsCountQuery, Depends(get_active_deals_count_query)],
    search: str | None = Query(None, max_length=255, description="위치 이름 부분 일치"),
    assigned_user_id: int | None = Query(None),
    page: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    order: str | None = Query(None, description="예: `org_active_deals_count DESC`"),
) -> ActiveDealsListResponse:
    """위치별 소속 조직의 활성 딜 수와 한도."""
    items, total = await query.execute(
        search=search,
        assigned_user_id=assigned_user_id,
        page=page,
        limit=limit,
        order=order,
    )
    return ActiveDealsListResponse(
        items=[ActiveDealsResponse.from_dto(item) for item in items],
        total_count=total,
    )


@router.get("/{location_id}/coupons", response_model=CouponListResponse)
async def list_location_coupons(
    location_id: int,
    query: Annotated[ListLocationCouponsQuery, Depends(get_location_coupons_query)],
    search: str | None = Query(None, max_length=255),
    page: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
) -> CouponListResponse:
    items, total = await query.execute(location_id, search=search, page=page, limit=limit)
    return CouponListResponse(
        items=[CouponResponse.from_entity(item) for item in items],
        total_count=total,
    )


@router.get("/{location_id}/users", response_model=AssignedUserListResponse)
async def list_assigned_users(
    location_id: int,
    query: Annotated[ListAssignedUsersQuery, Depends(get_assigned_users_query)],
    search: str | None = Query(None, max_length=255),
    page: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
) -> AssignedUserListResponse:
    items, total = await query.execute(location_id, search=search, page=page, limit=limit)
    return AssignedUserListResponse(
        items=[AssignedUserResponse.from_entity(item) for item in items],
        total_count=total,
    )

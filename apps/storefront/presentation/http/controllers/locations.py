"""Location Controller.

정적 경로(/search-count, /nearest, /organizations/...)는 `/{location_id}` 보다 먼저 등록합니다.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from storefront.application.common.dto import ActingUser
from storefront.application.management.commands import (
    CreateLocationInteractor,
    RemoveLocationInteractor,
    UpdateLocationInteractor,
    UpdateOffHoursInteractor,
)
from storefront.application.search.dto import DEFAULT_LIMIT, LocationSearchParams
from storefront.application.search.queries import (
    CountLocationsQuery,
    GetHoursTodayQuery,
    GetLocationQuery,
    GetNearestLocationQuery,
    SearchLocationsQuery,
)
from storefront.presentation.http.schemas import (
    HoursTodayResponse,
    LocationCountResponse,
    LocationCreateRequest,
    LocationResponse,
    LocationSearchResponse,
    LocationUpdateRequest,
    OffHoursRequest,
    OffHoursResponse,
)
from storefront.setup.dependencies import (
    get_acting_user,
    get_count_locations_query,
    get_create_location_interactor,
    get_hours_today_query,
    get_location_query,
    get_nearest_location_query,
    get_remove_location_interactor,
    get_search_locations_query,
    get_update_location_interactor,
    get_update_off_hours_interactor,
)

router = APIRouter(prefix="/locations", tags=["locations"])


@router.get("", response_model=LocationSearchResponse, summary="Search locations")
async def search_locations(
    query: Annotated[SearchLocationsQuery, Depends(get_search_locations_query)],
    search: str | None = Query(None, max_length=255, description="이름/도시/주소 부분 일치"),
    min_lat: float | None = Query(None),
    min_long: float | None = Query(None),
    max_lat: float | None = Query(None),
    max_long: float | None = Query(None),
    organization_id: int | None = Query(None),
    assigned_user_id: int | None = Query(None),
    coupon_id: int | None = Query(None),
    include_deleted: bool = Query(False),
    delivery_available_only: bool = Query(False),
    page: int = Query(0, ge=0, description="0부터 시작하는 페이지 번호"),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=1000),
    order: str | None = Query(None, description="예: `name ASC, priority DESC`"),
    start_from_lat: float | None = Query(None),
    start_from_long: float | None = Query(None),
    mile_radius: float | None = Query(None, gt=0),
) -> LocationSearchResponse:
    """위치를 검색합니다."""
    result = await query.execute(
        LocationSearchParams(
            search=search,
            min_lat=min_lat,
            min_long=min_long,
            max_lat=max_lat,
            max_long=max_long,
            organization_id=organization_id,
            assigned_user_id=assigned_user_id,
            coupon_id=coupon_id,
            include_deleted=include_deleted,
            delivery_available_only=delivery_available_only,
            page=page,
            limit=limit,
            order=order,
            start_from_lat=start_from_lat,
            start_from_long=start_from_long,
            mile_radius=mile_radius,
        )
    )
    return LocationSearchResponse(
        items=[LocationResponse.from_dto(item) for item in result.items],
        total_count=result.total_count,
    )


@router.get("/search-count", response_model=LocationCountResponse)
async def search_count(
    query: Annotated[CountLocationsQuery, Depends(get_count_locations_query)],
    search: str | None = Query(None, max_length=255),
) -> LocationCountResponse:
    """텍스트 검색과 일치하는 위치 수를 반환합니다."""
    return LocationCountResponse(count=await query.execute(search))


@router.get("/nearest", response_model=LocationResponse, summary="Find nearest location")
async def nearest_location(
    query: Annotated[GetNearestLocationQuery, Depends(get_nearest_location_query)],
    lat: float | None = Query(None),
    long: float | None = Query(None),
    organization_pos_id: int | None = Query(None),
) -> LocationResponse:
    """출발 좌표에서 가장 가까운 위치를 반환합니다."""
    result = await query.execute(
        latitude=lat, longitude=long, organization_pos_id=organization_pos_id
    )
    return LocationResponse.from_dto(result)


@router.put("/organizations/{organization_id}/off-hours", response_model=OffHoursResponse)
async def update_off_hours(
    organization_id: int,
    body: OffHoursRequest,
    interactor: Annotated[UpdateOffHoursInteractor, Depends(get_update_off_hours_interactor)],
) -> OffHoursResponse:
    """조직의 모든 위치에 영업시간 외 운영 플래그를 적용합니다."""
    updated = await interactor.execute(organization_id, body.allow_off_hours)
    return OffHoursResponse(
        organization_id=organization_id,
        allow_off_hours=body.allow_off_hours,
        locations_updated=updated,
    )


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
async def create_location(
    body: LocationCreateRequest,
    interactor: Annotated[CreateLocationInteractor, Depends(get_create_location_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> LocationResponse:
    location = await interactor.execute(body.to_draft(), acting_user)
    return LocationResponse.from_entity(location)


@router.get("/{location_id}", response_model=LocationResponse)
async def get_location(
    location_id: int,
    query: Annotated[GetLocationQuery, Depends(get_location_query)],
    include_deleted: bool = Query(False),
) -> LocationResponse:
    """위치 상세(영업시간, 휴일, 평점 포함)를 반환합니다."""
    result = await query.execute(location_id, include_deleted=include_deleted)
    return LocationResponse.from_dto(result)


@router.put("/{location_id}", response_model=LocationResponse)
async def update_location(
    location_id: int,
    body: LocationUpdateRequest,
    interactor: Annotated[UpdateLocationInteractor, Depends(get_update_location_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> LocationResponse:
    location = await interactor.execute(location_id, body.to_changes(), acting_user)
    return LocationResponse.from_entity(location)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_location(
    location_id: int,
    interactor: Annotated[RemoveLocationInteractor, Depends(get_remove_location_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> None:
    await interactor.execute(location_id, acting_user)


@router.get("/{location_id}/hours-today", response_model=HoursTodayResponse | None)
async def hours_today(
    location_id: int,
    query: Annotated[GetHoursTodayQuery, Depends(get_hours_today_query)],
) -> HoursTodayResponse | None:
    """오늘의 영업 상태. 위치 시간대가 없으면 null."""
    return HoursTodayResponse.from_dto(await query.execute(location_id))

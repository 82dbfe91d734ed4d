"""Search Params DTO."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.enums import SortColumn, SortDirection
from storefront.domain.value_objects import Coordinates

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 100


@dataclass(frozen=True)
class LocationSearchParams:
    """위치 검색 요청 DTO.

    bounding box는 네 값이 모두 있을 때만 적용됩니다.
    출발 좌표(start_from_lat/start_from_long)는 둘 다 있거나 둘 다 없어야 합니다.
    """

    search: str | None = None
    min_lat: float | None = None
    min_long: float | None = None
    max_lat: float | None = None
    max_long: float | None = None
    organization_id: int | None = None
    assigned_user_id: int | None = None
    coupon_id: int | None = None
    include_deleted: bool = False
    delivery_available_only: bool = False
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    order: str | None = None
    start_from_lat: float | None = None
    start_from_long: float | None = None
    mile_radius: float | None = None

    @property
    def has_bounding_box(self) -> bool:
        return None not in (self.min_lat, self.min_long, self.max_lat, self.max_long)

    @property
    def has_origin(self) -> bool:
        return self.start_from_lat is not None and self.start_from_long is not None

    @property
    def has_partial_origin(self) -> bool:
        return (self.start_from_lat is None) != (self.start_from_long is None)


@dataclass(frozen=True)
class SortSpec:
    """정렬 키 하나. column은 목록별 정렬 컬럼 열거형의 값입니다."""

    column: Enum
    direction: SortDirection = SortDirection.ASC

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC


@dataclass(frozen=True)
class BoundingBox:
    """축 정렬 영역 (경계 포함)."""

    min_lon: float
    min_lat: float
    max_lon: float
    max_lat: float


@dataclass(frozen=True)
class LocationCriteria:
    """저장소가 한 번의 쿼리로 처리하는 검색 조건.

    필터, 거리 계산, 반경, 정렬, 페이지 절단을 모두 포함합니다.
    origin이 없으면 distance 정렬 키는 무시됩니다.
    """

    search: str | None = None
    organization_id: int | None = None
    assigned_user_id: int | None = None
    coupon_id: int | None = None
    include_deleted: bool = False
    delivery_available_only: bool = False
    bounding_box: BoundingBox | None = None
    origin: Coordinates | None = None
    radius_km: float | None = None
    order: tuple[SortSpec, ...] = ()
    offset: int = 0
    limit: int = DEFAULT_LIMIT
    with_total: bool = True

    @property
    def needs_ratings(self) -> bool:
        return any(
            spec.column in (SortColumn.RATING, SortColumn.RATING_COUNT) for spec in self.order
        )

"""Search Locations Query.

위치 검색 Query(지휘자)입니다.
필터/거리/정렬/페이지 절단은 Port(저장소 쿼리 한 번)에, 보강은 Service에 위임합니다.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import InvalidStartingCoordinatesError
from storefront.application.search.dto import (
    BoundingBox,
    LocationCriteria,
    LocationSearchParams,
    LocationSearchResultDTO,
    SortSpec,
)
from storefront.application.search.services import (
    GeoIndexService,
    RankedRow,
    SearchOrderingService,
)
from storefront.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from storefront.application.search.ports import LocationReader
    from storefront.application.search.services import LocationEnricher

logger = logging.getLogger(__name__)


class SearchLocationsQuery:
    """위치 검색 Query.

    Workflow:
        1. 출발 좌표 검증 (둘 다 있거나 둘 다 없어야 함)
        2. 정렬 표현식 파싱 (Service)
        3. 검색 조건 구성 후 저장소 조회 (Port, 필터/반경/정렬/절단/개수)
        4. 페이지 행만 평점/영업시간 일괄 조회 및 오늘의 영업 상태 계산 (Service)
    """

    def __init__(
        self,
        location_reader: "LocationReader",
        enricher: "LocationEnricher",
    ) -> None:
        """Initialize.

        Args:
            location_reader: 위치 데이터 조회 Port
            enricher: 결과 보강 Service
        """
        self._reader = location_reader
        self._enricher = enricher

    async def execute(
        self,
        params: LocationSearchParams,
        now: datetime | None = None,
        with_total: bool = True,
    ) -> LocationSearchResultDTO:
        """위치를 검색합니다.

        Args:
            params: 검색 요청 DTO
            now: 영업 상태 계산 기준 시각 (기본: 현재)
            with_total: 전체 개수 계산 여부 (False면 페이지 행 수)

        Returns:
            결과 페이지와 필터 적용 후 전체 개수

        Raises:
            InvalidStartingCoordinatesError: 출발 좌표 중 하나만 주어짐
            InvalidCoordinatesError: 출발 좌표 범위 초과
            InvalidOrderError: 허용되지 않은 정렬 표현식
        """
        if params.has_partial_origin:
            raise InvalidStartingCoordinatesError()

        explicit_specs = SearchOrderingService.parse(params.order)
        specs = explicit_specs or SearchOrderingService.default_specs(params.has_origin)
        criteria = self.build_criteria(params, specs, with_total=with_total)

        logger.info(
            "Location search started",
            extra={
                "has_search": bool(params.search),
                "has_origin": params.has_origin,
                "has_bbox": params.has_bounding_box,
                "mile_radius": params.mile_radius,
                "organization_id": params.organization_id,
                "page": params.page,
                "limit": params.limit,
            },
        )

        page = await self._reader.search(criteria)
        rows = [RankedRow(location=hit.location, distance=hit.distance) for hit in page.hits]
        items = await self._enricher.enrich(rows, now=now)

        logger.info(
            "Location search completed",
            extra={"results_count": len(items), "total_count": page.total_count},
        )
        return LocationSearchResultDTO(items=items, total_count=page.total_count)

    @staticmethod
    def build_criteria(
        params: LocationSearchParams,
        specs: tuple[SortSpec, ...],
        with_total: bool = True,
    ) -> LocationCriteria:
        """요청 DTO를 저장소 검색 조건으로 변환합니다.

        반경은 출발 좌표가 있을 때만 적용됩니다.
        """
        origin = None
        radius_km = None
        if params.has_origin:
            origin = Coordinates(
                longitude=params.start_from_long, latitude=params.start_from_lat
            )
            if params.mile_radius is not None:
                radius_km = GeoIndexService.miles_to_km(params.mile_radius)

        bounding_box = None
        if params.has_bounding_box:
            bounding_box = BoundingBox(
                min_lon=params.min_long,
                min_lat=params.min_lat,
                max_lon=params.max_long,
                max_lat=params.max_lat,
            )

        return LocationCriteria(
            search=params.search or None,
            organization_id=params.organization_id,
            assigned_user_id=params.assigned_user_id,
            coupon_id=params.coupon_id,
            include_deleted=params.include_deleted,
            delivery_available_only=params.delivery_available_only,
            bounding_box=bounding_box,
            origin=origin,
            radius_km=radius_km,
            order=specs,
            offset=params.page * params.limit,
            limit=params.limit,
            with_total=with_total,
        )

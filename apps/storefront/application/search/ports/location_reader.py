"""Location Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping, Sequence

from storefront.application.search.dto import LocationCriteria, LocationPage
from storefront.domain.entities import Location

# (평균 평점, 평점 수)
RatingStats = tuple[float | Decimal | None, int]


class LocationReader(ABC):
    """위치 데이터 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def search(self, criteria: LocationCriteria) -> LocationPage:
        """조건에 맞는 위치 한 페이지와 전체 개수를 조회합니다.

        텍스트(name/city/address_line1/address_line2 부분 일치, 대소문자 무시),
        조직, 할당 사용자, 쿠폰, 삭제 여부, 배달 가능 여부, bounding box,
        반경 필터를 적용한 뒤 정렬하고 offset/limit으로 자릅니다.
        전체 개수는 절단 전 집합 기준입니다 (with_total=False면 생략 가능).

        Args:
            criteria: 검색 조건

        Returns:
            LocationPage
        """
        ...

    @abstractmethod
    async def find_by_id(self, location_id: int, include_deleted: bool = False) -> Location | None:
        """ID로 위치를 조회합니다.

        Args:
            location_id: 위치 ID
            include_deleted: 소프트 삭제된 위치 포함 여부

        Returns:
            Location 또는 None (미발견 시)
        """
        ...

    @abstractmethod
    async def count_matching(self, search: str) -> int:
        """텍스트 필터에 일치하는 삭제되지 않은 위치 수를 반환합니다."""
        ...

    @abstractmethod
    async def fetch_rating_stats(self, location_ids: Sequence[int]) -> Mapping[int, RatingStats]:
        """위치별 (평균 평점, 평점 수)를 일괄 조회합니다.

        삭제된 리뷰는 제외합니다. 리뷰가 없는 위치는 결과에 없을 수 있습니다.
        """
        ...

    @abstractmethod
    async def is_assigned(self, location_id: int, user_id: int) -> bool:
        """사용자가 위치에 할당되어 있는지 확인합니다."""
        ...

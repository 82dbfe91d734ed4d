"""Location Page DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from storefront.domain.entities import Location


@dataclass(frozen=True)
class LocationHit:
    """저장소 검색 결과 행. distance는 출발 좌표가 있을 때만 채워집니다 (km)."""

    location: Location
    distance: float | None = None


@dataclass(frozen=True)
class LocationPage:
    """정렬/절단된 행과 필터 적용 후 전체 개수."""

    hits: list[LocationHit] = field(default_factory=list)
    total_count: int = 0

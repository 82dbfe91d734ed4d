"""Active deals DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.search.dto import SortSpec


@dataclass(frozen=True)
class ActiveDealsParams:
    """활성 딜 집계 목록 요청 DTO. search는 위치 이름 부분 일치입니다."""

    search: str | None = None
    assigned_user_id: int | None = None
    page: int = 0
    limit: int = 100
    order: tuple[SortSpec, ...] = ()


@dataclass(frozen=True)
class LocationActiveDeals:
    """위치와 소속 조직의 활성 딜 수.

    활성 딜: 삭제되지 않은 위치에 연결된 삭제되지 않은 딜 중
    종료일이 없거나 딜 시간대 기준 오늘이 종료일 이전인 것.
    """

    id: int
    name: str
    organization_id: int
    organization_name: str
    organization_max_active_deals: int | None
    organization_active_deals_count: int

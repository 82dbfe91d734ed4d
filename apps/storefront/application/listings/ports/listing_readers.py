"""Listing reader ports (interfaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.application.listings.dto import ActiveDealsParams, LocationActiveDeals
    from storefront.domain.entities import Coupon, User


class CouponReader(Protocol):
    """위치 쿠폰 조회 포트."""

    async def list_for_location(
        self, location_id: int, search: str | None = None, page: int = 0, limit: int = 100
    ) -> tuple[list[Coupon], int]:
        """위치에 연결된 삭제되지 않은 쿠폰(이름순)과 전체 개수."""
        ...


class AssignedUserReader(Protocol):
    """위치에 할당된 사용자 조회 포트."""

    async def list_for_location(
        self, location_id: int, search: str | None = None, page: int = 0, limit: int = 100
    ) -> tuple[list[User], int]:
        """할당이 유효한 사용자(성, 이름 순)와 전체 개수."""
        ...


class ActiveDealsReader(Protocol):
    """조직별 활성 딜 집계 조회 포트."""

    async def list_locations(
        self, params: ActiveDealsParams
    ) -> tuple[list[LocationActiveDeals], int]:
        ...

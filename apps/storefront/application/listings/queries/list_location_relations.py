"""Location coupon and assigned-user queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.application.listings.ports import AssignedUserReader, CouponReader
    from storefront.domain.entities import Coupon, User


def _clean(search: str | None) -> str | None:
    if search is None or not search.strip():
        return None
    return search.strip()


class ListLocationCouponsQuery:
    """위치 쿠폰 목록 Query."""

    def __init__(self, coupon_reader: "CouponReader") -> None:
        self._coupons = coupon_reader

    async def execute(
        self, location_id: int, search: str | None = None, page: int = 0, limit: int = 100
    ) -> tuple[list["Coupon"], int]:
        return await self._coupons.list_for_location(
            location_id, search=_clean(search), page=page, limit=limit
        )


class ListAssignedUsersQuery:
    """위치에 할당된 사용자 목록 Query."""

    def __init__(self, user_reader: "AssignedUserReader") -> None:
        self._users = user_reader

    async def execute(
        self, location_id: int, search: str | None = None, page: int = 0, limit: int = 100
    ) -> tuple[list["User"], int]:
        return await self._users.list_for_location(
            location_id, search=_clean(search), page=page, limit=limit
        )

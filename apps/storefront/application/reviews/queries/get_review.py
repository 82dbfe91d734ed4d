"""Review queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.application.common.exceptions import ReviewNotFoundError

if TYPE_CHECKING:
    from storefront.application.reviews.ports import ReviewQueryGateway
    from storefront.domain.entities import Review


class GetReviewQuery:
    """리뷰 단건 조회 Query."""

    def __init__(self, review_query: "ReviewQueryGateway") -> None:
        self._review_query = review_query

    async def execute(
        self, location_id: int, review_id: int, include_deleted: bool = False
    ) -> "Review":
        review = await self._review_query.get_by_id(
            location_id, review_id, include_deleted=include_deleted
        )
        if review is None:
            raise ReviewNotFoundError()
        return review


class ListReviewsQuery:
    """위치 리뷰 목록 Query (작성일 역순)."""

    def __init__(self, review_query: "ReviewQueryGateway") -> None:
        self._review_query = review_query

    async def execute(
        self,
        location_id: int,
        search: str | None = None,
        page: int = 0,
        limit: int = 100,
        include_deleted: bool = False,
    ) -> tuple[list["Review"], int]:
        return await self._review_query.list_for_location(
            location_id,
            search=search or None,
            page=page,
            limit=limit,
            include_deleted=include_deleted,
        )

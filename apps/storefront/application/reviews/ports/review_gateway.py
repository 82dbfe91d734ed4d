"""Review gateway ports (interfaces)."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.domain.entities import Review, ReviewReport


class ReviewQueryGateway(Protocol):
    """리뷰 조회 포트."""

    async def get_by_id(
        self, location_id: int, review_id: int, include_deleted: bool = False
    ) -> Review | None:
        """위치에 속한 리뷰를 조회합니다."""
        ...

    async def list_for_location(
        self,
        location_id: int,
        search: str | None = None,
        page: int = 0,
        limit: int = 100,
        include_deleted: bool = False,
    ) -> tuple[list[Review], int]:
        """리뷰 목록(작성일 역순)과 전체 개수를 반환합니다."""
        ...

    async def count_since(self, location_id: int, user_id: int, since: datetime) -> int:
        """since 이후 사용자가 위치에 작성한 리뷰 수를 반환합니다."""
        ...


class ReviewCommandGateway(Protocol):
    """리뷰 수정 포트."""

    async def create(self, review: Review) -> Review:
        ...

    async def update(self, review: Review) -> Review:
        ...


class ReviewReportGateway(Protocol):
    """리뷰 신고 기록 포트."""

    async def create(self, report: ReviewReport) -> ReviewReport:
        ...

    async def count_notification_recipients(self, location_id: int) -> int:
        """신고 알림을 받을 사용자 수 (위치에 할당된 사용자)."""
        ...

"""Review HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from storefront.domain.entities import Review, ReviewReport


class ReviewCreateRequest(BaseModel):
    """리뷰 작성 요청 스키마.

    user_id를 생략하면 X-User-Id 헤더의 사용자로 작성합니다.
    """

    rating: float
    review: str | None = None
    user_id: int | None = None
    disable_interval: bool = False


class ReviewUpdateRequest(BaseModel):
    rating: float | None = None
    review: str | None = None


class ReviewResponse(BaseModel):
    id: int | None
    location_id: int
    user_id: int
    rating: float
    review: str | None = None
    deleted: bool = False
    created: datetime | None = None
    modified: datetime | None = None

    @classmethod
    def from_entity(cls, review: Review) -> ReviewResponse:
        return cls(
            id=review.id,
            location_id=review.location_id,
            user_id=review.user_id,
            rating=review.rating,
            review=review.review,
            deleted=review.deleted,
            created=review.created,
            modified=review.modified,
        )


class ReviewListResponse(BaseModel):
    items: list[ReviewResponse]
    total_count: int


class ReviewReportRequest(BaseModel):
    reason: str | None = Field(None, max_length=2000)


class ReviewReportResponse(BaseModel):
    id: int | None
    location_id: int
    review_id: int
    reported_by: int
    reason: str | None = None
    created: datetime | None = None

    @classmethod
    def from_entity(cls, report: ReviewReport) -> ReviewReportResponse:
        return cls(
            id=report.id,
            location_id=report.location_id,
            review_id=report.review_id,
            reported_by=report.reported_by,
            reason=report.reason,
            created=report.created,
        )

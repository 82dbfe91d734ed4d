"""Review Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from storefront.application.common.dto import ActingUser
from storefront.application.common.exceptions import (
    AdminRightsRequiredError,
    ReviewerRequiredError,
)
from storefront.application.reviews.commands import (
    CreateReviewInteractor,
    ReportReviewInteractor,
    UpdateReviewInteractor,
)
from storefront.application.reviews.queries import GetReviewQuery, ListReviewsQuery
from storefront.presentation.http.schemas import (
    ReviewCreateRequest,
    ReviewListResponse,
    ReviewReportRequest,
    ReviewReportResponse,
    ReviewResponse,
    ReviewUpdateRequest,
)
from storefront.setup.dependencies import (
    get_acting_user,
    get_create_review_interactor,
    get_list_reviews_query,
    get_report_review_interactor,
    get_review_query,
    get_update_review_interactor,
)

router = APIRouter(prefix="/locations/{location_id}/reviews", tags=["reviews"])


@router.get("", response_model=ReviewListResponse)
async def list_reviews(
    location_id: int,
    query: Annotated[ListReviewsQuery, Depends(get_list_reviews_query)],
    search: str | None = Query(None, max_length=255),
    page: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    include_deleted: bool = Query(False),
) -> ReviewListResponse:
    """위치 리뷰 목록 (작성일 역순)."""
    items, total = await query.execute(
        location_id, search=search, page=page, limit=limit, include_deleted=include_deleted
    )
    return ReviewListResponse(
        items=[ReviewResponse.from_entity(item) for item in items],
        total_count=total,
    )


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_review(
    location_id: int,
    body: ReviewCreateRequest,
    interactor: Annotated[CreateReviewInteractor, Depends(get_create_review_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> ReviewResponse:
    """리뷰를 작성합니다.

    disable_interval은 관리자/사이트 관리자만 사용할 수 있습니다.
    """
    if body.disable_interval and not acting_user.can_bypass_review_interval:
        raise AdminRightsRequiredError()
    user_id = body.user_id if body.user_id is not None else acting_user.user_id
    if user_id is None:
        raise ReviewerRequiredError()
    review = await interactor.execute(
        location_id,
        user_id,
        body.rating,
        review=body.review,
        disable_interval=body.disable_interval,
    )
    return ReviewResponse.from_entity(review)


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(
    location_id: int,
    review_id: int,
    query: Annotated[GetReviewQuery, Depends(get_review_query)],
    include_deleted: bool = Query(False),
) -> ReviewResponse:
    review = await query.execute(location_id, review_id, include_deleted=include_deleted)
    return ReviewResponse.from_entity(review)


@router.put("/{review_id}", response_model=ReviewResponse)
async def update_review(
    location_id: int,
    review_id: int,
    body: ReviewUpdateRequest,
    interactor: Annotated[UpdateReviewInteractor, Depends(get_update_review_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
) -> ReviewResponse:
    review = await interactor.execute(
        location_id,
        review_id,
        rating=body.rating,
        review=body.review,
        modified_by=acting_user.user_id,
    )
    return ReviewResponse.from_entity(review)


@router.post(
    "/{review_id}/report",
    response_model=ReviewReportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def report_review(
    location_id: int,
    review_id: int,
    interactor: Annotated[ReportReviewInteractor, Depends(get_report_review_interactor)],
    acting_user: Annotated[ActingUser, Depends(get_acting_user)],
    body: ReviewReportRequest | None = None,
) -> ReviewReportResponse:
    """부적절한 리뷰를 신고합니다. X-User-Id 헤더가 필요합니다."""
    report = await interactor.execute(
        location_id,
        review_id,
        acting_user,
        reason=body.reason if body is not None else None,
    )
    return ReviewReportResponse.from_entity(report)

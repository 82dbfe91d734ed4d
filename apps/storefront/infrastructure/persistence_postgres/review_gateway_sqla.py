"""SQLAlchemy implementation of review gateways."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.common.exceptions import ReviewNotFoundError
from storefront.domain.entities import Review, ReviewReport
from storefront.infrastructure.persistence_postgres.mappers import (
    report_to_domain,
    review_to_domain,
)
from storefront.infrastructure.persistence_postgres.models import (
    LocationRatingModel,
    ReviewReportModel,
    UserLocationModel,
)


class SqlaReviewQueryGateway:
    """리뷰 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(
        self, location_id: int, review_id: int, include_deleted: bool = False
    ) -> Review | None:
        query = select(LocationRatingModel).where(
            LocationRatingModel.id == review_id,
            LocationRatingModel.location_id == location_id,
        )
        if not include_deleted:
            query = query.where(LocationRatingModel.deleted.is_(False))
        result = await self._session.execute(query)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return review_to_domain(model)

    async def list_for_location(
        self,
        location_id: int,
        search: str | None = None,
        page: int = 0,
        limit: int = 100,
        include_deleted: bool = False,
    ) -> tuple[list[Review], int]:
        conditions = [LocationRatingModel.location_id == location_id]
        if not include_deleted:
            conditions.append(LocationRatingModel.deleted.is_(False))
        if search:
            conditions.append(LocationRatingModel.review.ilike(f"%{search}%"))

        total = await self._session.execute(
            select(func.count()).select_from(LocationRatingModel).where(*conditions)
        )
        result = await self._session.execute(
            select(LocationRatingModel)
            .where(*conditions)
            .order_by(LocationRatingModel.created.desc(), LocationRatingModel.id.desc())
            .offset(page * limit)
            .limit(limit)
        )
        items = [review_to_domain(model) for model in result.scalars().all()]
        return items, int(total.scalar_one())

    async def count_since(self, location_id: int, user_id: int, since: datetime) -> int:
        result = await self._session.execute(
            select(func.count())
            .select_from(LocationRatingModel)
            .where(
                LocationRatingModel.location_id == location_id,
                LocationRatingModel.user_id == user_id,
                LocationRatingModel.created > since,
            )
        )
        return int(result.scalar_one())


class SqlaReviewCommandGateway:
    """리뷰 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, review: Review) -> Review:
        model = LocationRatingModel(
            location_id=review.location_id,
            user_id=review.user_id,
            rating=review.rating,
            review=review.review,
            deleted=review.deleted,
            created_by=review.created_by,
            modified_by=review.modified_by,
        )
        if review.created is not None:
            model.created = review.created
        if review.modified is not None:
            model.modified = review.modified
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return review_to_domain(model)

    async def update(self, review: Review) -> Review:
        result = await self._session.execute(
            select(LocationRatingModel).where(LocationRatingModel.id == review.id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise ReviewNotFoundError()
        model.rating = review.rating
        model.review = review.review
        model.deleted = review.deleted
        model.modified_by = review.modified_by
        if review.modified is not None:
            model.modified = review.modified
        await self._session.flush()
        return review_to_domain(model)


class SqlaReviewReportGateway:
    """리뷰 신고 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, report: ReviewReport) -> ReviewReport:
        model = ReviewReportModel(
            location_id=report.location_id,
            review_id=report.review_id,
            reported_by=report.reported_by,
            reason=report.reason,
        )
        if report.created is not None:
            model.created = report.created
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return report_to_domain(model)

    async def count_notification_recipients(self, location_id: int) -> int:
        """신고 알림 대상(위치에 할당된 사용자) 수."""
        result = await self._session.execute(
            select(func.count())
            .select_from(UserLocationModel)
            .where(
                UserLocationModel.location_id == location_id,
                UserLocationModel.deleted.is_(False),
            )
        )
        return int(result.scalar_one())

"""Create review command."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import ReviewSpamError
from storefront.domain.entities import Review
from storefront.domain.exceptions import InvalidRatingError, LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.common.ports import TransactionManager
    from storefront.application.reviews.ports import ReviewCommandGateway, ReviewQueryGateway
    from storefront.application.search.ports import LocationReader

logger = logging.getLogger(__name__)

DEFAULT_REVIEW_INTERVAL_DAYS = 30


def validate_rating(rating: float) -> None:
    if not 0 <= rating <= 5:
        raise InvalidRatingError(rating)


class CreateReviewInteractor:
    """리뷰 작성 유스케이스.

    같은 사용자는 같은 위치에 interval_days 동안 한 번만 리뷰를 남길 수 있습니다.
    disable_interval=True 이면 검사를 건너뜁니다 (권한 확인은 호출자 책임).
    """

    def __init__(
        self,
        location_reader: "LocationReader",
        review_query: "ReviewQueryGateway",
        review_command: "ReviewCommandGateway",
        transaction_manager: "TransactionManager",
        interval_days: int = DEFAULT_REVIEW_INTERVAL_DAYS,
    ) -> None:
        self._locations = location_reader
        self._review_query = review_query
        self._review_command = review_command
        self._tx = transaction_manager
        self._interval_days = interval_days

    async def execute(
        self,
        location_id: int,
        user_id: int,
        rating: float,
        review: str | None = None,
        disable_interval: bool = False,
        now: datetime | None = None,
    ) -> Review:
        """리뷰를 작성합니다.

        Raises:
            InvalidRatingError: 0..5 범위 밖의 평점
            LocationNotFoundError: 위치 없음
            ReviewSpamError: 작성 간격 제한 위반
        """
        validate_rating(rating)

        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()

        instant = now or datetime.now(timezone.utc)
        if not disable_interval:
            since = instant - timedelta(days=self._interval_days)
            recent = await self._review_query.count_since(location_id, user_id, since)
            if recent > 0:
                logger.info(
                    "Review rejected by interval",
                    extra={"location_id": location_id, "user_id": user_id},
                )
                raise ReviewSpamError(self._interval_days)

        created = await self._review_command.create(
            Review(
                location_id=location_id,
                user_id=user_id,
                rating=rating,
                review=review,
                created=instant,
                modified=instant,
                created_by=user_id,
                modified_by=user_id,
            )
        )
        await self._tx.commit()

        logger.info(
            "Review created",
            extra={"location_id": location_id, "review_id": created.id, "rating": rating},
        )
        return created

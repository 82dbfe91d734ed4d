"""Update review command."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import NoChangesProvidedError, ReviewNotFoundError
from storefront.application.reviews.commands.create_review import validate_rating

if TYPE_CHECKING:
    from storefront.application.common.ports import TransactionManager
    from storefront.application.reviews.ports import ReviewCommandGateway, ReviewQueryGateway
    from storefront.domain.entities import Review

logger = logging.getLogger(__name__)


class UpdateReviewInteractor:
    """리뷰 수정 유스케이스."""

    def __init__(
        self,
        review_query: "ReviewQueryGateway",
        review_command: "ReviewCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._review_query = review_query
        self._review_command = review_command
        self._tx = transaction_manager

    async def execute(
        self,
        location_id: int,
        review_id: int,
        rating: float | None = None,
        review: str | None = None,
        modified_by: int | None = None,
    ) -> "Review":
        if rating is None and review is None:
            raise NoChangesProvidedError()
        if rating is not None:
            validate_rating(rating)

        existing = await self._review_query.get_by_id(location_id, review_id)
        if existing is None:
            raise ReviewNotFoundError()

        updated = replace(
            existing,
            rating=rating if rating is not None else existing.rating,
            review=review if review is not None else existing.review,
            modified=datetime.now(timezone.utc),
            modified_by=modified_by,
        )
        saved = await self._review_command.update(updated)
        await self._tx.commit()

        logger.info("Review updated", extra={"location_id": location_id, "review_id": review_id})
        return saved

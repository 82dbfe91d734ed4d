"""Review Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Review:
    """위치 리뷰 (LocationRating)."""

    location_id: int
    user_id: int
    rating: float
    review: str | None = None
    deleted: bool = False
    created: datetime | None = None
    modified: datetime | None = None
    created_by: int | None = None
    modified_by: int | None = None
    id: int | None = None


@dataclass(frozen=True)
class ReviewReport:
    """부적절한 리뷰 신고."""

    location_id: int
    review_id: int
    reported_by: int
    reason: str | None = None
    created: datetime | None = None
    id: int | None = None

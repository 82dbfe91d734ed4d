"""Rating Aggregator Service."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


@dataclass(frozen=True)
class RatingSummary:
    """위치 평점 요약."""

    rating: float | None
    rating_count: int


EMPTY_RATING = RatingSummary(rating=None, rating_count=0)


class RatingAggregator:
    """평균 평점을 0.5 단위로 반올림합니다.

    DB의 ROUND(AVG(rating) * 2) / 2 와 동일한 결과를 냅니다.
    """

    @staticmethod
    def round_half(mean: float | Decimal | None) -> float | None:
        if mean is None:
            return None
        doubled = (Decimal(str(mean)) * 2).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return float(doubled / 2)

    @classmethod
    def summarize(cls, mean: float | Decimal | None, count: int | None) -> RatingSummary:
        if not count:
            return EMPTY_RATING
        return RatingSummary(rating=cls.round_half(mean), rating_count=int(count))

"""Review Commands."""

from storefront.application.reviews.commands.create_review import (
    DEFAULT_REVIEW_INTERVAL_DAYS,
    CreateReviewInteractor,
)
from storefront.application.reviews.commands.report_review import ReportReviewInteractor
from storefront.application.reviews.commands.update_review import UpdateReviewInteractor

__all__ = [
    "DEFAULT_REVIEW_INTERVAL_DAYS",
    "CreateReviewInteractor",
    "ReportReviewInteractor",
    "UpdateReviewInteractor",
]

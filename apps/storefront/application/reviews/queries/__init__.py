"""Review Queries."""

from storefront.application.reviews.queries.get_review import GetReviewQuery, ListReviewsQuery

__all__ = ["GetReviewQuery", "ListReviewsQuery"]

"""Review Ports."""

from storefront.application.reviews.ports.review_gateway import (
    ReviewCommandGateway,
    ReviewQueryGateway,
    ReviewReportGateway,
)

__all__ = ["ReviewCommandGateway", "ReviewQueryGateway", "ReviewReportGateway"]

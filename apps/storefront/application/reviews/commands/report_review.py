"""Report review command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import ReporterRequiredError, ReviewNotFoundError
from storefront.domain.entities import ReviewReport

if TYPE_CHECKING:
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.reviews.ports import ReviewQueryGateway, ReviewReportGateway

logger = logging.getLogger(__name__)


class ReportReviewInteractor:
    """리뷰 신고 유스케이스.

    신고를 기록하고 알림 대상 수를 로그로 남깁니다. 메일 발송은 하지 않습니다.
    """

    def __init__(
        self,
        review_query: "ReviewQueryGateway",
        report_gateway: "ReviewReportGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._review_query = review_query
        self._reports = report_gateway
        self._tx = transaction_manager

    async def execute(
        self,
        location_id: int,
        review_id: int,
        acting_user: "ActingUser",
        reason: str | None = None,
        now: datetime | None = None,
    ) -> ReviewReport:
        """
        Raises:
            ReporterRequiredError: 신고자 없음
            ReviewNotFoundError: 위치에 속한 리뷰 없음
        """
        if acting_user.user_id is None:
            raise ReporterRequiredError()

        review = await self._review_query.get_by_id(location_id, review_id)
        if review is None:
            raise ReviewNotFoundError()

        report = await self._reports.create(
            ReviewReport(
                location_id=location_id,
                review_id=review_id,
                reported_by=acting_user.user_id,
                reason=reason,
                created=now or datetime.now(timezone.utc),
            )
        )
        await self._tx.commit()

        recipients = await self._reports.count_notification_recipients(location_id)
        logger.info(
            "Review reported",
            extra={
                "location_id": location_id,
                "review_id": review_id,
                "report_id": report.id,
                "reported_by": acting_user.user_id,
                "recipients": recipients,
            },
        )
        return report

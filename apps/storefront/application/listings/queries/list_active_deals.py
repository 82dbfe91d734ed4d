"""Active deals count query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.application.listings.dto import ActiveDealsParams
from storefront.application.search.services import SearchOrderingService
from storefront.domain.enums import ActiveDealsSortColumn

if TYPE_CHECKING:
    from storefront.application.listings.dto import LocationActiveDeals
    from storefront.application.listings.ports import ActiveDealsReader

logger = logging.getLogger(__name__)


class ListActiveDealsCountQuery:
    """위치별 조직 활성 딜 수 Query.

    조직의 딜 한도(max_active_deals)와 비교하는 관리 화면용입니다.
    정렬이 없으면 위치 id 오름차순입니다.
    """

    def __init__(self, reader: "ActiveDealsReader") -> None:
        self._reader = reader

    async def execute(
        self,
        search: str | None = None,
        assigned_user_id: int | None = None,
        page: int = 0,
        limit: int = 100,
        order: str | None = None,
    ) -> tuple[list["LocationActiveDeals"], int]:
        """
        Raises:
            InvalidOrderError: 허용되지 않은 정렬 표현식
        """
        params = ActiveDealsParams(
            search=search.strip() if search and search.strip() else None,
            assigned_user_id=assigned_user_id,
            page=page,
            limit=limit,
            order=SearchOrderingService.parse(order, ActiveDealsSortColumn),
        )
        items, total = await self._reader.list_locations(params)
        logger.info(
            "Active deals counted",
            extra={"results_count": len(items), "total_count": total},
        )
        return items, total

"""Get check-in query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.application.common.exceptions import CheckInNotFoundError

if TYPE_CHECKING:
    from storefront.application.check_in.ports import CheckInQueryGateway
    from storefront.domain.entities import MobileCheckIn


class GetCheckInQuery:
    """체크인 단건 조회 Query."""

    def __init__(self, check_in_query: "CheckInQueryGateway") -> None:
        self._check_in_query = check_in_query

    async def execute(self, check_in_id: int) -> "MobileCheckIn":
        check_in = await self._check_in_query.get_by_id(check_in_id)
        if check_in is None:
            raise CheckInNotFoundError()
        return check_in

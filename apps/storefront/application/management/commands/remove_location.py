"""Remove location command - Soft delete."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.application.common.dto import ANONYMOUS
from storefront.application.management.commands.policies import ensure_assigned
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.management.ports import LocationCommandGateway
    from storefront.application.search.ports import LocationReader

logger = logging.getLogger(__name__)


class RemoveLocationInteractor:
    """위치 소프트 삭제 유스케이스.

    시간/리뷰 등 하위 데이터의 연쇄 삭제는 호출자 책임입니다.
    """

    def __init__(
        self,
        location_reader: "LocationReader",
        location_command: "LocationCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._locations = location_reader
        self._location_command = location_command
        self._tx = transaction_manager

    async def execute(self, location_id: int, acting_user: "ActingUser" = ANONYMOUS) -> None:
        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()

        await ensure_assigned(self._locations, location_id, acting_user)

        await self._location_command.soft_delete(location_id, modified_by=acting_user.user_id)
        await self._tx.commit()

        logger.info("Location removed", extra={"location_id": location_id})

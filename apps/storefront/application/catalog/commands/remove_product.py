"""Remove product command - Soft delete."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.application.common.dto import ANONYMOUS
from storefront.application.common.exceptions import ProductNotFoundError
from storefront.application.management.commands.policies import ensure_assigned

if TYPE_CHECKING:
    from storefront.application.catalog.ports import ProductCommandGateway, ProductQueryGateway
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.search.ports import LocationReader

logger = logging.getLogger(__name__)


class RemoveProductInteractor:
    """상품 소프트 삭제 유스케이스. 삭제한 사용자를 modified_by로 기록합니다."""

    def __init__(
        self,
        location_reader: "LocationReader",
        product_query: "ProductQueryGateway",
        product_command: "ProductCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._locations = location_reader
        self._product_query = product_query
        self._product_command = product_command
        self._tx = transaction_manager

    async def execute(
        self, location_id: int, product_id: int, acting_user: "ActingUser" = ANONYMOUS
    ) -> None:
        product = await self._product_query.get_by_id(
            product_id, location_id=location_id, include_hidden=True
        )
        if product is None:
            raise ProductNotFoundError()

        await ensure_assigned(self._locations, location_id, acting_user)

        await self._product_command.soft_delete(product_id, modified_by=acting_user.user_id)
        await self._tx.commit()

        logger.info(
            "Product removed", extra={"location_id": location_id, "product_id": product_id}
        )

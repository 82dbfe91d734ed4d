"""Create product command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.dto import ANONYMOUS
from storefront.application.management.commands.policies import ensure_assigned
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.catalog.dto import ProductDraft
    from storefront.application.catalog.ports import ProductCommandGateway
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.search.ports import LocationReader
    from storefront.domain.entities import Product

logger = logging.getLogger(__name__)


class CreateProductInteractor:
    """상품 등록 유스케이스. 사이트 관리자는 할당된 위치에만 등록할 수 있습니다."""

    def __init__(
        self,
        location_reader: "LocationReader",
        product_command: "ProductCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._locations = location_reader
        self._product_command = product_command
        self._tx = transaction_manager

    async def execute(
        self,
        location_id: int,
        draft: "ProductDraft",
        acting_user: "ActingUser" = ANONYMOUS,
    ) -> "Product":
        """
        Raises:
            LocationNotFoundError: 위치 없음
            LocationNotAssignedError: 할당되지 않은 위치 (사이트 관리자)
        """
        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()

        await ensure_assigned(self._locations, location_id, acting_user)

        product = draft.to_product(
            location_id, created_by=acting_user.user_id, now=datetime.now(timezone.utc)
        )
        created = await self._product_command.create(product)
        await self._tx.commit()

        logger.info(
            "Product created",
            extra={"location_id": location_id, "product_id": created.id},
        )
        return created

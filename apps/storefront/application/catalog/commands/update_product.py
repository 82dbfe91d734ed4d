"""Update product command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.dto import ANONYMOUS
from storefront.application.common.exceptions import NoChangesProvidedError, ProductNotFoundError
from storefront.application.management.commands.policies import ensure_assigned

if TYPE_CHECKING:
    from storefront.application.catalog.dto import ProductChanges
    from storefront.application.catalog.ports import ProductCommandGateway, ProductQueryGateway
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.search.ports import LocationReader
    from storefront.domain.entities import Product

logger = logging.getLogger(__name__)


class UpdateProductInteractor:
    """상품 수정 유스케이스.

    숨김 상품도 수정할 수 있으며 갱신된 전체 레코드를 반환합니다.
    """

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
        self,
        location_id: int,
        product_id: int,
        changes: "ProductChanges",
        acting_user: "ActingUser" = ANONYMOUS,
    ) -> "Product":
        """
        Raises:
            NoChangesProvidedError: 변경사항 없음
            ProductNotFoundError: 위치에 속한 상품 없음
            LocationNotAssignedError: 할당되지 않은 위치 (사이트 관리자)
        """
        if not changes.has_changes():
            raise NoChangesProvidedError()

        existing = await self._product_query.get_by_id(
            product_id, location_id=location_id, include_hidden=True
        )
        if existing is None:
            raise ProductNotFoundError()

        await ensure_assigned(self._locations, location_id, acting_user)

        updated = changes.apply(
            existing, modified_by=acting_user.user_id, now=datetime.now(timezone.utc)
        )
        saved = await self._product_command.update(updated)
        await self._tx.commit()

        logger.info(
            "Product updated",
            extra={"product_id": product_id, "fields": sorted(changes.provided())},
        )
        return saved

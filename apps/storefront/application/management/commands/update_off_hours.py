"""Update organization off-hours command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import (
    OffHoursDisabledError,
    OrganizationNotFoundError,
)

if TYPE_CHECKING:
    from storefront.application.common.ports import TransactionManager
    from storefront.application.management.ports import LocationCommandGateway
    from storefront.application.search.ports import OrganizationReader

logger = logging.getLogger(__name__)


class UpdateOffHoursInteractor:
    """조직의 모든 위치에 영업시간 외 운영 플래그를 적용합니다."""

    def __init__(
        self,
        organization_reader: "OrganizationReader",
        location_command: "LocationCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._organizations = organization_reader
        self._location_command = location_command
        self._tx = transaction_manager

    async def execute(self, organization_id: int, allow_off_hours: bool) -> int:
        """변경된 위치 수를 반환합니다.

        Raises:
            OrganizationNotFoundError: 조직 없음
            OffHoursDisabledError: 조직이 허용하지 않는데 켜려고 함
        """
        organization = await self._organizations.find_by_id(organization_id)
        if organization is None:
            raise OrganizationNotFoundError()
        if allow_off_hours and not organization.allow_off_hours:
            raise OffHoursDisabledError()

        updated = await self._location_command.set_allow_off_hours(
            organization_id, allow_off_hours
        )
        await self._tx.commit()

        logger.info(
            "Organization off hours updated",
            extra={
                "organization_id": organization_id,
                "allow_off_hours": allow_off_hours,
                "locations_updated": updated,
            },
        )
        return updated

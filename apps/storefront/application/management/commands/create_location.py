"""Create location command."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.dto import ANONYMOUS
from storefront.application.management.commands.policies import (
    ensure_off_hours_allowed,
    resolve_timezone,
)

if TYPE_CHECKING:
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.management.dto import LocationDraft
    from storefront.application.management.ports import (
        LocationCommandGateway,
        TimezoneLookupPort,
    )
    from storefront.application.search.ports import OrganizationReader
    from storefront.domain.entities import Location

logger = logging.getLogger(__name__)


class CreateLocationInteractor:
    """위치 생성 유스케이스."""

    def __init__(
        self,
        location_command: "LocationCommandGateway",
        organization_reader: "OrganizationReader",
        transaction_manager: "TransactionManager",
        timezone_lookup: "TimezoneLookupPort | None" = None,
    ) -> None:
        self._location_command = location_command
        self._organizations = organization_reader
        self._tx = transaction_manager
        self._timezone_lookup = timezone_lookup

    async def execute(
        self, draft: "LocationDraft", acting_user: "ActingUser" = ANONYMOUS
    ) -> "Location":
        """위치를 생성합니다.

        좌표 검증은 Coordinates 생성 시점에 끝납니다.

        Raises:
            OffHoursDisabledError: 조직이 영업시간 외 운영을 허용하지 않음
            TimezoneLookupError: 시간대 조회 실패
        """
        if draft.allow_off_hours:
            await ensure_off_hours_allowed(self._organizations, draft.organization_id)

        timezone_name = await resolve_timezone(
            self._timezone_lookup, draft.coordinates, draft.timezone
        )
        location = replace(
            draft.to_location(created_by=acting_user.user_id, now=datetime.now(timezone.utc)),
            timezone=timezone_name,
        )

        created = await self._location_command.create(location)
        await self._tx.commit()

        logger.info(
            "Location created",
            extra={
                "location_id": created.id,
                "organization_id": created.organization_id,
                "timezone": created.timezone,
            },
        )
        return created

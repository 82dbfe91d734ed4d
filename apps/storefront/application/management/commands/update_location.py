"""Update location command."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.dto import ANONYMOUS
from storefront.application.common.exceptions import NoChangesProvidedError
from storefront.application.management.commands.policies import (
    ensure_assigned,
    ensure_off_hours_allowed,
    resolve_timezone,
)
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.common.dto import ActingUser
    from storefront.application.common.ports import TransactionManager
    from storefront.application.management.dto import LocationChanges
    from storefront.application.management.ports import (
        LocationCommandGateway,
        TimezoneLookupPort,
    )
    from storefront.application.search.ports import LocationReader, OrganizationReader
    from storefront.domain.entities import Location

logger = logging.getLogger(__name__)


class UpdateLocationInteractor:
    """위치 수정 유스케이스."""

    def __init__(
        self,
        location_reader: "LocationReader",
        location_command: "LocationCommandGateway",
        organization_reader: "OrganizationReader",
        transaction_manager: "TransactionManager",
        timezone_lookup: "TimezoneLookupPort | None" = None,
    ) -> None:
        self._locations = location_reader
        self._location_command = location_command
        self._organizations = organization_reader
        self._tx = transaction_manager
        self._timezone_lookup = timezone_lookup

    async def execute(
        self,
        location_id: int,
        changes: "LocationChanges",
        acting_user: "ActingUser" = ANONYMOUS,
    ) -> "Location":
        """위치를 수정합니다.

        Raises:
            NoChangesProvidedError: 변경사항 없음
            LocationNotFoundError: 위치 없음 (삭제된 위치 포함 조회)
            LocationNotAssignedError: 할당되지 않은 위치 (사이트 관리자)
            OffHoursDisabledError: 조직이 영업시간 외 운영을 허용하지 않음
            TimezoneLookupError: 시간대 조회 실패
        """
        if not changes.has_changes():
            raise NoChangesProvidedError()

        existing = await self._locations.find_by_id(location_id, include_deleted=True)
        if existing is None:
            raise LocationNotFoundError()

        await ensure_assigned(self._locations, location_id, acting_user)

        updated = changes.apply(
            existing, modified_by=acting_user.user_id, now=datetime.now(timezone.utc)
        )
        if changes.allow_off_hours:
            await ensure_off_hours_allowed(self._organizations, updated.organization_id)

        # 좌표만 바뀌고 시간대가 주어지지 않으면 다시 조회
        if changes.coordinates is not None and changes.timezone is None:
            timezone_name = await resolve_timezone(
                self._timezone_lookup, changes.coordinates, None
            )
            if timezone_name is None:
                logger.warning(
                    "Timezone not resolved for new coordinates, keeping previous timezone",
                    extra={"location_id": location_id, "timezone": existing.timezone},
                )
            updated = replace(updated, timezone=timezone_name or existing.timezone)

        saved = await self._location_command.update(updated)
        await self._tx.commit()

        logger.info(
            "Location updated",
            extra={"location_id": location_id, "fields": sorted(changes.provided())},
        )
        return saved

"""Location write policies.

생성/수정/삭제 유스케이스가 공유하는 정책 검사입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import (
    LocationNotAssignedError,
    OffHoursDisabledError,
    OrganizationNotFoundError,
)

if TYPE_CHECKING:
    from storefront.application.common.dto import ActingUser
    from storefront.application.management.ports import TimezoneLookupPort
    from storefront.application.search.ports import LocationReader, OrganizationReader
    from storefront.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)


async def ensure_off_hours_allowed(
    organization_reader: "OrganizationReader", organization_id: int | None
) -> None:
    """조직이 영업시간 외 운영을 허용하는지 확인합니다.

    Raises:
        OrganizationNotFoundError: 조직 없음
        OffHoursDisabledError: 조직이 허용하지 않음
    """
    if organization_id is None:
        raise OffHoursDisabledError()
    organization = await organization_reader.find_by_id(organization_id)
    if organization is None:
        raise OrganizationNotFoundError()
    if not organization.allow_off_hours:
        raise OffHoursDisabledError()


async def ensure_assigned(
    location_reader: "LocationReader", location_id: int, acting_user: "ActingUser"
) -> None:
    """사이트 관리자는 할당된 위치만 수정할 수 있습니다.

    Raises:
        LocationNotAssignedError: 할당되지 않은 위치
    """
    if not acting_user.is_site_admin:
        return
    if acting_user.user_id is None or not await location_reader.is_assigned(
        location_id, acting_user.user_id
    ):
        raise LocationNotAssignedError()


async def resolve_timezone(
    timezone_lookup: "TimezoneLookupPort | None",
    coordinates: "Coordinates | None",
    timezone_name: str | None,
) -> str | None:
    """시간대가 비어 있고 좌표가 있으면 외부 서비스로 조회합니다.

    Raises:
        TimezoneLookupError: 외부 조회 실패 (포트 구현에서 발생)
    """
    if timezone_name or coordinates is None:
        return timezone_name
    if timezone_lookup is None:
        logger.warning(
            "Timezone lookup client not configured, timezone left empty",
            extra={"lat": coordinates.latitude, "lon": coordinates.longitude},
        )
        return None
    return await timezone_lookup.lookup(coordinates)

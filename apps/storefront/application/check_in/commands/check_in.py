"""Mobile check-in command.

휴대폰 번호당 위치 현지 날짜 기준 하루 한 번만 체크인할 수 있습니다.

Note:
    조회 → 날짜 비교 → 삽입 순서의 check-then-act 이며 원자적이지 않습니다.
    같은 번호의 동시 요청은 둘 다 성공할 수 있습니다 (best-effort 불변식).
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from storefront.application.common.exceptions import (
    CheckInRestrictedError,
    MobileNumberRequiredError,
)
from storefront.application.search.services import HoursResolver
from storefront.domain.entities import MobileCheckIn
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.check_in.ports import (
        CheckInCommandGateway,
        CheckInQueryGateway,
        LatestCheckIn,
    )
    from storefront.application.common.ports import TransactionManager
    from storefront.application.search.ports import LocationReader

logger = logging.getLogger(__name__)


class CheckInInteractor:
    """모바일 체크인 유스케이스.

    Workflow:
        1. 휴대폰 번호 확인
        2. 가장 최근 체크인의 위치 시간대 기준 같은 날짜인지 확인
        3. 위치 존재 확인
        4. 체크인 저장
    """

    def __init__(
        self,
        location_reader: "LocationReader",
        check_in_query: "CheckInQueryGateway",
        check_in_command: "CheckInCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._locations = location_reader
        self._check_in_query = check_in_query
        self._check_in_command = check_in_command
        self._tx = transaction_manager

    async def execute(
        self,
        location_id: int,
        mobile_number: str | None,
        now: datetime | None = None,
    ) -> MobileCheckIn:
        """체크인을 기록합니다.

        Raises:
            MobileNumberRequiredError: 휴대폰 번호 누락
            CheckInRestrictedError: 같은 현지 날짜에 이미 체크인함
            LocationNotFoundError: 위치 없음
        """
        if not mobile_number or not mobile_number.strip():
            raise MobileNumberRequiredError()
        mobile_number = mobile_number.strip()

        instant = now or datetime.now(timezone.utc)
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)

        latest = await self._check_in_query.get_latest_by_mobile_number(mobile_number)
        if latest is not None and self._same_local_day(latest, instant):
            raise CheckInRestrictedError()

        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()

        created = await self._check_in_command.create(
            MobileCheckIn(
                location_id=location_id,
                mobile_number=mobile_number,
                created=instant,
                modified=instant,
            )
        )
        await self._tx.commit()

        logger.info(
            "Mobile check-in recorded",
            extra={"location_id": location_id, "check_in_id": created.id},
        )
        return created

    @staticmethod
    def _same_local_day(latest: "LatestCheckIn", instant: datetime) -> bool:
        checked_in_at = latest.check_in.checked_in_at
        if checked_in_at is None:
            return False
        if checked_in_at.tzinfo is None:
            checked_in_at = checked_in_at.replace(tzinfo=timezone.utc)

        current_local = HoursResolver.local_now(latest.timezone, instant)
        previous_local = HoursResolver.local_now(latest.timezone, checked_in_at)
        if current_local is None or previous_local is None:
            logger.warning(
                "Check-in location has no timezone, comparing UTC calendar days",
                extra={"location_id": latest.check_in.location_id},
            )
            current_local = instant.astimezone(timezone.utc)
            previous_local = checked_in_at.astimezone(timezone.utc)
        return current_local.date() == previous_local.date()

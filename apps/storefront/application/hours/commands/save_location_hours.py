"""Save location hours command - Upserts weekly hour rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from storefront.application.hours.services import HourRuleValidator
from storefront.domain.enums import HourKind
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.common.ports import TransactionManager
    from storefront.application.hours.dto import HourRuleInput
    from storefront.application.hours.ports import HoursCommandGateway
    from storefront.application.search.ports import LocationReader
    from storefront.domain.entities import HourRule

logger = logging.getLogger(__name__)


class SaveLocationHoursInteractor:
    """요일 규칙 저장 유스케이스 (정규/배달 공용).

    입력 전체를 먼저 검증한 뒤 요일 기준으로 upsert 합니다.
    """

    def __init__(
        self,
        location_reader: "LocationReader",
        hours_command: "HoursCommandGateway",
        transaction_manager: "TransactionManager",
        kind: HourKind = HourKind.REGULAR,
    ) -> None:
        self._locations = location_reader
        self._hours_command = hours_command
        self._tx = transaction_manager
        self._kind = kind

    async def execute(self, location_id: int, inputs: Sequence[HourRuleInput]) -> list[HourRule]:
        """요일 규칙을 저장합니다.

        Args:
            location_id: 위치 ID
            inputs: 저장할 규칙 (요일당 하나)

        Returns:
            저장된 HourRule 목록

        Raises:
            LocationNotFoundError: 위치 없음
            InvalidTimeError: 시각 형식 오류
            InvalidTimeRangeError: start >= end
        """
        rules = HourRuleValidator.validate_rules(location_id, inputs)

        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()

        saved = await self._hours_command.upsert_rules(location_id, rules, self._kind)
        await self._tx.commit()

        logger.info(
            "Location hours saved",
            extra={"location_id": location_id, "kind": self._kind.value, "count": len(saved)},
        )
        return saved

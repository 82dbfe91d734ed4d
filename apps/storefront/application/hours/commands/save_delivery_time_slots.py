"""Save delivery time slots command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from storefront.application.hours.services import HourRuleValidator
from storefront.domain.exceptions import LocationNotFoundError

if TYPE_CHECKING:
    from storefront.application.common.ports import TransactionManager
    from storefront.application.hours.dto import TimeSlotInput
    from storefront.application.hours.ports import DeliveryTimeSlotGateway
    from storefront.application.search.ports import LocationReader
    from storefront.domain.entities import DeliveryTimeSlot

logger = logging.getLogger(__name__)


class SaveDeliveryTimeSlotsInteractor:
    """배달 시간대 저장 유스케이스."""

    def __init__(
        self,
        location_reader: "LocationReader",
        slot_gateway: "DeliveryTimeSlotGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._locations = location_reader
        self._slots = slot_gateway
        self._tx = transaction_manager

    async def execute(
        self, location_id: int, inputs: Sequence[TimeSlotInput]
    ) -> list[DeliveryTimeSlot]:
        slots = HourRuleValidator.validate_slots(location_id, inputs)

        if await self._locations.find_by_id(location_id) is None:
            raise LocationNotFoundError()

        saved = await self._slots.upsert_slots(location_id, slots)
        await self._tx.commit()

        logger.info(
            "Delivery time slots saved",
            extra={"location_id": location_id, "count": len(saved)},
        )
        return saved

"""Hours HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from storefront.application.hours.dto import HourRuleInput, TimeSlotInput
from storefront.domain.entities import DeliveryTimeSlot


class HourRuleRequest(BaseModel):
    """요일 규칙 저장 요청 스키마.

    시각은 `HH:MM`, `HH:MM:SS` 또는 `hh:mm AM` 형식의 문자열입니다.
    """

    day_of_week: int = Field(..., description="0=Sunday ... 6=Saturday")
    is_open: bool
    start_time: str | None = None
    end_time: str | None = None

    def to_input(self) -> HourRuleInput:
        return HourRuleInput(
            day_of_week=self.day_of_week,
            is_open=self.is_open,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class TimeSlotRequest(BaseModel):
    """배달 시간대 저장 요청 스키마."""

    day: str
    day_num: int
    time_slot: str
    max_orders_per_hour: int = Field(..., ge=0)

    def to_input(self) -> TimeSlotInput:
        return TimeSlotInput(
            day=self.day,
            day_num=self.day_num,
            time_slot=self.time_slot,
            max_orders_per_hour=self.max_orders_per_hour,
        )


class TimeSlotResponse(BaseModel):
    id: int | None = None
    location_id: int | None = None
    day: str
    day_num: int
    time_slot: str
    max_orders_per_hour: int

    @classmethod
    def from_entity(cls, slot: DeliveryTimeSlot) -> TimeSlotResponse:
        return cls(
            id=slot.id,
            location_id=slot.location_id,
            day=slot.day,
            day_num=slot.day_num,
            time_slot=slot.time_slot,
            max_orders_per_hour=slot.max_orders_per_hour,
        )

"""Hours Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Body, Depends, Query

from storefront.application.hours.commands import (
    SaveDeliveryTimeSlotsInteractor,
    SaveLocationHoursInteractor,
)
from storefront.application.hours.queries import (
    GetDeliveryTimeSlotsQuery,
    GetHolidaysQuery,
    GetLocationHoursQuery,
)
from storefront.presentation.http.schemas import (
    HolidayResponse,
    HourRuleRequest,
    HourRuleResponse,
    TimeSlotRequest,
    TimeSlotResponse,
)
from storefront.setup.dependencies import (
    get_delivery_hours_query,
    get_holidays_query,
    get_location_hours_query,
    get_save_delivery_hours_interactor,
    get_save_hours_interactor,
    get_save_time_slots_interactor,
    get_time_slots_query,
)

router = APIRouter(prefix="/locations/{location_id}", tags=["hours"])


@router.get("/hours", response_model=list[HourRuleResponse])
async def get_hours(
    location_id: int,
    query: Annotated[GetLocationHoursQuery, Depends(get_location_hours_query)],
) -> list[HourRuleResponse]:
    rules = await query.execute(location_id)
    return [HourRuleResponse.from_entity(rule) for rule in rules]


@router.put("/hours", response_model=list[HourRuleResponse])
async def save_hours(
    location_id: int,
    interactor: Annotated[SaveLocationHoursInteractor, Depends(get_save_hours_interactor)],
    body: list[HourRuleRequest] = Body(...),
) -> list[HourRuleResponse]:
    """요일 규칙을 저장합니다 (요일 기준 upsert)."""
    saved = await interactor.execute(location_id, [rule.to_input() for rule in body])
    return [HourRuleResponse.from_entity(rule) for rule in saved]


@router.get("/delivery-hours", response_model=list[HourRuleResponse])
async def get_delivery_hours(
    location_id: int,
    query: Annotated[GetLocationHoursQuery, Depends(get_delivery_hours_query)],
) -> list[HourRuleResponse]:
    rules = await query.execute(location_id)
    return [HourRuleResponse.from_entity(rule) for rule in rules]


@router.put("/delivery-hours", response_model=list[HourRuleResponse])
async def save_delivery_hours(
    location_id: int,
    interactor: Annotated[
        SaveLocationHoursInteractor, Depends(get_save_delivery_hours_interactor)
    ],
    body: list[HourRuleRequest] = Body(...),
) -> list[HourRuleResponse]:
    saved = await interactor.execute(location_id, [rule.to_input() for rule in body])
    return [HourRuleResponse.from_entity(rule) for rule in saved]


@router.get("/holidays", response_model=list[HolidayResponse])
async def get_holidays(
    location_id: int,
    query: Annotated[GetHolidaysQuery, Depends(get_holidays_query)],
) -> list[HolidayResponse]:
    holidays = await query.execute(location_id)
    return [HolidayResponse.from_entity(holiday) for holiday in holidays]


@router.get("/delivery-time-slots", response_model=list[TimeSlotResponse])
async def get_delivery_time_slots(
    location_id: int,
    query: Annotated[GetDeliveryTimeSlotsQuery, Depends(get_time_slots_query)],
    day_num: int | None = Query(None, ge=0, le=6),
) -> list[TimeSlotResponse]:
    slots = await query.execute(location_id, day_num=day_num)
    return [TimeSlotResponse.from_entity(slot) for slot in slots]


@router.put("/delivery-time-slots", response_model=list[TimeSlotResponse])
async def save_delivery_time_slots(
    location_id: int,
    interactor: Annotated[
        SaveDeliveryTimeSlotsInteractor, Depends(get_save_time_slots_interactor)
    ],
    body: list[TimeSlotRequest] = Body(...),
) -> list[TimeSlotResponse]:
    saved = await interactor.execute(location_id, [slot.to_input() for slot in body])
    return [TimeSlotResponse.from_entity(slot) for slot in saved]

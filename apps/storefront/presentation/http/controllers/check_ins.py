"""Mobile Check-In Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from storefront.application.check_in.commands import CheckInInteractor
from storefront.application.check_in.queries import GetCheckInQuery
from storefront.presentation.http.schemas import CheckInRequest, CheckInResponse
from storefront.setup.dependencies import get_check_in_interactor, get_check_in_query

router = APIRouter(prefix="/locations/mobile-check-in", tags=["check-in"])


@router.post("", response_model=CheckInResponse, status_code=status.HTTP_201_CREATED)
async def check_in(
    body: CheckInRequest,
    interactor: Annotated[CheckInInteractor, Depends(get_check_in_interactor)],
) -> CheckInResponse:
    """휴대폰 번호로 체크인합니다 (위치 현지 날짜 기준 하루 한 번)."""
    created = await interactor.execute(body.location_id, body.mobile_number)
    return CheckInResponse.from_entity(created)


@router.get("/{check_in_id}", response_model=CheckInResponse)
async def get_check_in(
    check_in_id: int,
    query: Annotated[GetCheckInQuery, Depends(get_check_in_query)],
) -> CheckInResponse:
    return CheckInResponse.from_entity(await query.execute(check_in_id))

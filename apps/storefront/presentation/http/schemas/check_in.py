"""Mobile Check-In HTTP Schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from storefront.domain.entities import MobileCheckIn


class CheckInRequest(BaseModel):
    """체크인 요청 스키마. 번호 누락은 애플리케이션 계층에서 검증합니다."""

    location_id: int
    mobile_number: str | None = None


class CheckInResponse(BaseModel):
    id: int | None
    location_id: int
    mobile_number: str
    created: datetime | None = None
    modified: datetime | None = None

    @classmethod
    def from_entity(cls, check_in: MobileCheckIn) -> CheckInResponse:
        return cls(
            id=check_in.id,
            location_id=check_in.location_id,
            mobile_number=check_in.mobile_number,
            created=check_in.created,
            modified=check_in.modified,
        )

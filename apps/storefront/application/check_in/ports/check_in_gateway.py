"""Check-in gateway ports (interfaces)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.domain.entities import MobileCheckIn


@dataclass(frozen=True)
class LatestCheckIn:
    """가장 최근 체크인과 그 위치의 시간대."""

    check_in: "MobileCheckIn"
    timezone: str | None


class CheckInQueryGateway(Protocol):
    """체크인 조회 포트."""

    async def get_latest_by_mobile_number(self, mobile_number: str) -> LatestCheckIn | None:
        """모든 위치를 통틀어 가장 최근 체크인을 반환합니다."""
        ...

    async def get_by_id(self, check_in_id: int) -> MobileCheckIn | None:
        ...


class CheckInCommandGateway(Protocol):
    """체크인 저장 포트."""

    async def create(self, check_in: MobileCheckIn) -> MobileCheckIn:
        ...

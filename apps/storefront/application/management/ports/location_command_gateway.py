"""Location command gateway port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from storefront.domain.entities import Location


class LocationCommandGateway(Protocol):
    """위치 수정 포트."""

    async def create(self, location: Location) -> Location:
        """새 위치를 생성합니다."""
        ...

    async def update(self, location: Location) -> Location:
        """위치 정보를 업데이트합니다."""
        ...

    async def soft_delete(self, location_id: int, modified_by: int | None = None) -> None:
        """deleted 플래그를 설정합니다."""
        ...

    async def set_allow_off_hours(self, organization_id: int, allow_off_hours: bool) -> int:
        """조직의 삭제되지 않은 모든 위치에 플래그를 설정하고 변경 수를 반환합니다."""
        ...

"""SQLAlchemy implementation of location command gateway."""

from __future__ import annotations

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domain.entities import Location
from storefront.domain.exceptions import LocationNotFoundError
from storefront.infrastructure.persistence_postgres.mappers import (
    apply_location,
    location_to_domain,
)
from storefront.infrastructure.persistence_postgres.models import LocationModel


class SqlaLocationCommandGateway:
    """위치 수정 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, location: Location) -> Location:
        """새 위치를 생성합니다."""
        model = apply_location(LocationModel(), location)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return location_to_domain(model)

    async def update(self, location: Location) -> Location:
        """위치 정보를 업데이트합니다."""
        model = await self._get_model(location.id)
        apply_location(model, location)
        await self._session.flush()
        return location_to_domain(model)

    async def soft_delete(self, location_id: int, modified_by: int | None = None) -> None:
        """deleted 플래그를 설정합니다."""
        model = await self._get_model(location_id)
        model.deleted = True
        model.modified_by = modified_by
        await self._session.flush()

    async def set_allow_off_hours(self, organization_id: int, allow_off_hours: bool) -> int:
        """조직의 삭제되지 않은 모든 위치에 플래그를 설정합니다."""
        result = await self._session.execute(
            update(LocationModel)
            .where(
                LocationModel.organization_id == organization_id,
                LocationModel.deleted.is_(False),
            )
            .values(allow_off_hours=allow_off_hours)
        )
        await self._session.flush()
        return int(result.rowcount or 0)

    async def _get_model(self, location_id: int | None) -> LocationModel:
        result = await self._session.execute(
            select(LocationModel).where(LocationModel.id == location_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise LocationNotFoundError()
        return model

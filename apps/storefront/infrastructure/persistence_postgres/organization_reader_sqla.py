"""SQLAlchemy Organization Reader Implementation."""

from __future__ import annotations

from typing import Mapping, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.search.ports import OrganizationReader
from storefront.domain.entities import Organization
from storefront.infrastructure.persistence_postgres.mappers import organization_to_domain
from storefront.infrastructure.persistence_postgres.models import OrganizationModel


class SqlaOrganizationReader(OrganizationReader):
    """SQLAlchemy 기반 조직 Reader."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, organization_id: int) -> Organization | None:
        return await self._find_one(OrganizationModel.id == organization_id)

    async def find_by_pos_id(self, pos_id: int) -> Organization | None:
        return await self._find_one(OrganizationModel.pos_id == pos_id)

    async def find_by_ids(self, organization_ids: Sequence[int]) -> Mapping[int, Organization]:
        if not organization_ids:
            return {}
        result = await self._session.execute(
            select(OrganizationModel).where(
                OrganizationModel.id.in_(organization_ids),
                OrganizationModel.deleted.is_(False),
            )
        )
        return {int(m.id): organization_to_domain(m) for m in result.scalars().all()}

    async def _find_one(self, condition) -> Organization | None:
        result = await self._session.execute(
            select(OrganizationModel)
            .where(condition, OrganizationModel.deleted.is_(False))
            .limit(1)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return organization_to_domain(model)

"""SQLAlchemy implementation of check-in gateways."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.check_in.ports import LatestCheckIn
from storefront.domain.entities import MobileCheckIn
from storefront.infrastructure.persistence_postgres.mappers import check_in_to_domain
from storefront.infrastructure.persistence_postgres.models import LocationModel, MobileCheckInModel


class SqlaCheckInQueryGateway:
    """체크인 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_latest_by_mobile_number(self, mobile_number: str) -> LatestCheckIn | None:
        result = await self._session.execute(
            select(MobileCheckInModel, LocationModel.timezone)
            .outerjoin(LocationModel, LocationModel.id == MobileCheckInModel.location_id)
            .where(MobileCheckInModel.mobile_number == mobile_number)
            .order_by(MobileCheckInModel.modified.desc(), MobileCheckInModel.id.desc())
            .limit(1)
        )
        row = result.first()
        if row is None:
            return None
        model, timezone_name = row
        return LatestCheckIn(check_in=check_in_to_domain(model), timezone=timezone_name)

    async def get_by_id(self, check_in_id: int) -> MobileCheckIn | None:
        result = await self._session.execute(
            select(MobileCheckInModel).where(MobileCheckInModel.id == check_in_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return check_in_to_domain(model)


class SqlaCheckInCommandGateway:
    """체크인 저장 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, check_in: MobileCheckIn) -> MobileCheckIn:
        model = MobileCheckInModel(
            location_id=check_in.location_id,
            mobile_number=check_in.mobile_number,
        )
        if check_in.created is not None:
            model.created = check_in.created
        if check_in.modified is not None:
            model.modified = check_in.modified
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return check_in_to_domain(model)

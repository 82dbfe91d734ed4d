"""SQLAlchemy implementation of listing readers (coupons, users, active deals)."""

from __future__ import annotations

from sqlalchemy import Date, Select, and_, cast, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.listings.dto import ActiveDealsParams, LocationActiveDeals
from storefront.domain.entities import Coupon, User
from storefront.domain.enums import ActiveDealsSortColumn
from storefront.infrastructure.persistence_postgres.location_reader_sqla import (
    _LIKE_ESCAPE,
    escape_like,
)
from storefront.infrastructure.persistence_postgres.mappers import (
    coupon_to_domain,
    user_to_domain,
)
from storefront.infrastructure.persistence_postgres.models import (
    CouponModel,
    DealModel,
    LocationCouponModel,
    LocationDealModel,
    LocationModel,
    OrganizationModel,
    UserLocationModel,
    UserModel,
)

# 시간대가 없는 딜은 UTC 날짜로 종료일을 비교
DEFAULT_DEAL_TIMEZONE = "UTC"


class SqlaCouponReader:
    """위치 쿠폰 Reader."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_location(
        self, location_id: int, search: str | None = None, page: int = 0, limit: int = 100
    ) -> tuple[list[Coupon], int]:
        conditions = [
            LocationCouponModel.location_id == location_id,
            LocationCouponModel.deleted.is_(False),
            CouponModel.deleted.is_(False),
        ]
        if search:
            pattern = escape_like(search)
            conditions.append(
                or_(
                    CouponModel.name.ilike(pattern, escape=_LIKE_ESCAPE),
                    CouponModel.code.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )
        total = await self._session.execute(
            select(func.count())
            .select_from(CouponModel)
            .join(LocationCouponModel, LocationCouponModel.coupon_id == CouponModel.id)
            .where(*conditions)
        )
        result = await self._session.execute(
            select(CouponModel)
            .join(LocationCouponModel, LocationCouponModel.coupon_id == CouponModel.id)
            .where(*conditions)
            .order_by(func.lower(CouponModel.name), CouponModel.id)
            .offset(page * limit)
            .limit(limit)
        )
        items = [coupon_to_domain(model) for model in result.scalars().all()]
        return items, int(total.scalar_one())


class SqlaAssignedUserReader:
    """위치 할당 사용자 Reader."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_for_location(
        self, location_id: int, search: str | None = None, page: int = 0, limit: int = 100
    ) -> tuple[list[User], int]:
        conditions = [
            UserLocationModel.location_id == location_id,
            UserLocationModel.deleted.is_(False),
            UserModel.deleted.is_(False),
        ]
        if search:
            pattern = escape_like(search)
            conditions.append(
                or_(
                    UserModel.first_name.ilike(pattern, escape=_LIKE_ESCAPE),
                    UserModel.last_name.ilike(pattern, escape=_LIKE_ESCAPE),
                    UserModel.email.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )
        total = await self._session.execute(
            select(func.count())
            .select_from(UserModel)
            .join(UserLocationModel, UserLocationModel.user_id == UserModel.id)
            .where(*conditions)
        )
        result = await self._session.execute(
            select(UserModel)
            .join(UserLocationModel, UserLocationModel.user_id == UserModel.id)
            .where(*conditions)
            .order_by(
                func.lower(UserModel.last_name).nulls_last(),
                func.lower(UserModel.first_name).nulls_last(),
                UserModel.id,
            )
            .offset(page * limit)
            .limit(limit)
        )
        items = [user_to_domain(model) for model in result.scalars().all()]
        return items, int(total.scalar_one())


class SqlaActiveDealsReader:
    """위치별 조직 활성 딜 수 Reader.

    조직 단위로 중복 없는 활성 딜을 집계한 서브쿼리를 위치 목록에 LEFT JOIN 합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_locations(
        self, params: ActiveDealsParams
    ) -> tuple[list[LocationActiveDeals], int]:
        total = await self._session.execute(self.build_count_query(params))
        result = await self._session.execute(self.build_list_query(params))
        items = [
            LocationActiveDeals(
                id=int(row.id),
                name=row.name,
                organization_id=int(row.organization_id),
                organization_name=row.organization_name,
                organization_max_active_deals=row.organization_max_active_deals,
                organization_active_deals_count=int(row.org_active_deals_count),
            )
            for row in result.all()
        ]
        return items, int(total.scalar_one())

    @classmethod
    def build_list_query(cls, params: ActiveDealsParams) -> Select:
        active = cls.active_deals_subquery()
        deals_count = func.count(active.c.deal_id).label("org_active_deals_count")
        expressions = {
            ActiveDealsSortColumn.ID: LocationModel.id,
            ActiveDealsSortColumn.NAME: LocationModel.name,
            ActiveDealsSortColumn.ORG_ACTIVE_DEALS_COUNT: deals_count,
        }
        clauses = [
            expressions[spec.column].desc() if spec.descending else expressions[spec.column].asc()
            for spec in params.order
        ]
        if all(spec.column != ActiveDealsSortColumn.ID for spec in params.order):
            clauses.append(LocationModel.id.asc())

        return (
            select(
                LocationModel.id,
                LocationModel.name,
                OrganizationModel.id.label("organization_id"),
                OrganizationModel.name.label("organization_name"),
                OrganizationModel.max_active_deals.label("organization_max_active_deals"),
                deals_count,
            )
            .select_from(LocationModel)
            .join(OrganizationModel, OrganizationModel.id == LocationModel.organization_id)
            .outerjoin(active, active.c.organization_id == OrganizationModel.id)
            .where(*cls._conditions(params))
            .group_by(LocationModel.id, OrganizationModel.id)
            .order_by(*clauses)
            .offset(params.page * params.limit)
            .limit(params.limit)
        )

    @classmethod
    def build_count_query(cls, params: ActiveDealsParams) -> Select:
        filtered = (
            select(LocationModel.id)
            .join(OrganizationModel, OrganizationModel.id == LocationModel.organization_id)
            .where(*cls._conditions(params))
            .subquery()
        )
        return select(func.count()).select_from(filtered)

    @staticmethod
    def active_deals_subquery():
        """조직별 활성 딜 (organization_id, deal_id).

        종료일이 없거나 딜 시간대 기준 오늘 날짜가 종료일 이하인 딜만 포함합니다.
        """
        today_in_deal_tz = cast(
            func.timezone(
                func.coalesce(DealModel.timezone, DEFAULT_DEAL_TIMEZONE), func.now()
            ),
            Date,
        )
        return (
            select(
                LocationModel.organization_id.label("organization_id"),
                DealModel.id.label("deal_id"),
            )
            .select_from(LocationModel)
            .join(
                LocationDealModel,
                and_(
                    LocationDealModel.location_id == LocationModel.id,
                    LocationDealModel.deleted.is_(False),
                ),
            )
            .join(
                DealModel,
                and_(DealModel.id == LocationDealModel.deal_id, DealModel.deleted.is_(False)),
            )
            .where(
                LocationModel.deleted.is_(False),
                or_(DealModel.end_date.is_(None), today_in_deal_tz <= DealModel.end_date),
            )
            .group_by(LocationModel.organization_id, DealModel.id)
            .subquery("active_deals")
        )

    @staticmethod
    def _conditions(params: ActiveDealsParams) -> list:
        conditions = [LocationModel.deleted.is_(False)]
        if params.search:
            conditions.append(
                LocationModel.name.ilike(escape_like(params.search), escape=_LIKE_ESCAPE)
            )
        if params.assigned_user_id is not None:
            assigned = select(UserLocationModel.location_id).where(
                UserLocationModel.user_id == params.assigned_user_id,
                UserLocationModel.deleted.is_(False),
            )
            conditions.append(LocationModel.id.in_(assigned))
        return conditions

"""SQLAlchemy Location Reader Implementation."""

from __future__ import annotations

import math
from typing import Mapping, Sequence

from sqlalchemy import Float, Numeric, Select, and_, cast, func, null, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.search.dto import (
    LocationCriteria,
    LocationHit,
    LocationPage,
)
from storefront.application.search.ports import LocationReader, RatingStats
from storefront.application.search.services.geo_index import EARTH_RADIUS_M
from storefront.domain.entities import Location
from storefront.domain.enums import SortColumn
from storefront.domain.value_objects import Coordinates
from storefront.infrastructure.persistence_postgres.mappers import location_to_domain
from storefront.infrastructure.persistence_postgres.models import (
    LocationCouponModel,
    LocationModel,
    LocationRatingModel,
    UserLocationModel,
)
from storefront.infrastructure.persistence_postgres.types import LATITUDE, LONGITUDE

_LIKE_ESCAPE = "\\"
EARTH_RADIUS_KM = EARTH_RADIUS_M / 1000.0


def escape_like(search: str) -> str:
    """LIKE 와일드카드를 이스케이프한 `%search%` 패턴."""
    escaped = (
        search.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class SqlaLocationReader(LocationReader):
    """SQLAlchemy 기반 위치 Reader.

    LocationReader Port를 구현합니다.
    거리(Haversine), bounding box, 반경, 정렬, offset/limit을 모두 SQL로 처리하고
    전체 개수는 같은 필터의 서브쿼리에 count를 적용해 구합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def search(self, criteria: LocationCriteria) -> LocationPage:
        """조건에 맞는 위치 한 페이지와 전체 개수를 조회합니다."""
        result = await self._session.execute(self.build_search_query(criteria))
        hits = [
            LocationHit(
                location=location_to_domain(model),
                distance=float(distance_km) if distance_km is not None else None,
            )
            for model, distance_km in result.all()
        ]
        if not criteria.with_total:
            return LocationPage(hits=hits, total_count=len(hits))

        total = await self._session.execute(self.build_count_query(criteria))
        return LocationPage(hits=hits, total_count=int(total.scalar_one()))

    async def find_by_id(self, location_id: int, include_deleted: bool = False) -> Location | None:
        """ID로 위치를 조회합니다."""
        query = select(LocationModel).where(LocationModel.id == location_id)
        if not include_deleted:
            query = query.where(LocationModel.deleted.is_(False))
        result = await self._session.execute(query)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return location_to_domain(model)

    async def count_matching(self, search: str) -> int:
        """텍스트 필터에 일치하는 삭제되지 않은 위치 수를 반환합니다."""
        query = (
            select(func.count())
            .select_from(LocationModel)
            .where(LocationModel.deleted.is_(False), self._text_filter(search))
        )
        result = await self._session.execute(query)
        return int(result.scalar_one())

    async def fetch_rating_stats(self, location_ids: Sequence[int]) -> Mapping[int, RatingStats]:
        """위치별 (평균 평점, 평점 수)를 일괄 조회합니다."""
        if not location_ids:
            return {}
        query = (
            select(
                LocationRatingModel.location_id,
                func.avg(LocationRatingModel.rating),
                func.count(LocationRatingModel.id),
            )
            .where(
                LocationRatingModel.location_id.in_(location_ids),
                LocationRatingModel.deleted.is_(False),
            )
            .group_by(LocationRatingModel.location_id)
        )
        result = await self._session.execute(query)
        return {int(location_id): (mean, int(count)) for location_id, mean, count in result.all()}

    async def is_assigned(self, location_id: int, user_id: int) -> bool:
        """사용자가 위치에 할당되어 있는지 확인합니다."""
        query = select(UserLocationModel.id).where(
            UserLocationModel.location_id == location_id,
            UserLocationModel.user_id == user_id,
            UserLocationModel.deleted.is_(False),
        )
        result = await self._session.execute(query.limit(1))
        return result.first() is not None

    @classmethod
    def build_search_query(cls, criteria: LocationCriteria) -> Select:
        """필터, 거리, 정렬, 페이지 절단을 포함한 검색 쿼리."""
        distance = cls._distance_or_null(criteria.origin)
        query = select(LocationModel, distance).where(*cls._conditions(criteria, distance))

        ratings = None
        if criteria.needs_ratings:
            ratings = cls._rating_stats_subquery()
            query = query.outerjoin(ratings, ratings.c.location_id == LocationModel.id)

        return (
            query.order_by(*cls._order_by(criteria, distance, ratings))
            .offset(criteria.offset)
            .limit(criteria.limit)
        )

    @classmethod
    def build_count_query(cls, criteria: LocationCriteria) -> Select:
        """검색 쿼리와 같은 필터의 절단 전 개수."""
        distance = cls._distance_or_null(criteria.origin)
        filtered = (
            select(LocationModel.id).where(*cls._conditions(criteria, distance)).subquery()
        )
        return select(func.count()).select_from(filtered)

    @classmethod
    def _conditions(cls, criteria: LocationCriteria, distance) -> list:
        conditions = []

        if not criteria.include_deleted:
            conditions.append(LocationModel.deleted.is_(False))
        if criteria.search:
            conditions.append(cls._text_filter(criteria.search))
        if criteria.organization_id is not None:
            conditions.append(LocationModel.organization_id == criteria.organization_id)
        if criteria.assigned_user_id is not None:
            assigned = select(UserLocationModel.location_id).where(
                UserLocationModel.user_id == criteria.assigned_user_id,
                UserLocationModel.deleted.is_(False),
            )
            conditions.append(LocationModel.id.in_(assigned))
        if criteria.coupon_id is not None:
            with_coupon = select(LocationCouponModel.location_id).where(
                LocationCouponModel.coupon_id == criteria.coupon_id,
                LocationCouponModel.deleted.is_(False),
            )
            conditions.append(LocationModel.id.in_(with_coupon))
        if criteria.delivery_available_only:
            conditions.append(LocationModel.is_delivery_available.is_(True))

        box = criteria.bounding_box
        if box is not None:
            conditions.append(
                and_(
                    LocationModel.long_lat.is_not(None),
                    LocationModel.long_lat[LONGITUDE].between(box.min_lon, box.max_lon),
                    LocationModel.long_lat[LATITUDE].between(box.min_lat, box.max_lat),
                )
            )
        # 거리를 계산할 수 없는 행(NULL)은 비교 결과가 NULL이므로 제외됨
        if criteria.origin is not None and criteria.radius_km is not None:
            conditions.append(distance <= criteria.radius_km)

        return conditions

    @staticmethod
    def _order_by(criteria: LocationCriteria, distance, ratings) -> list:
        """SortSpec을 ORDER BY로 변환합니다. NULL은 방향과 관계없이 마지막."""
        expressions = {
            SortColumn.ID: LocationModel.id,
            SortColumn.NAME: func.lower(LocationModel.name),
            SortColumn.CITY: func.lower(LocationModel.city),
            SortColumn.PRIORITY: LocationModel.priority,
            SortColumn.CREATED: LocationModel.created,
            SortColumn.MODIFIED: LocationModel.modified,
        }
        if criteria.origin is not None:
            expressions[SortColumn.DISTANCE] = distance
        if ratings is not None:
            expressions[SortColumn.RATING] = ratings.c.rating
            expressions[SortColumn.RATING_COUNT] = func.coalesce(ratings.c.rating_count, 0)

        clauses = []
        for spec in criteria.order:
            expression = expressions.get(spec.column)
            if expression is None:
                continue
            ordered = expression.desc() if spec.descending else expression.asc()
            clauses.append(ordered.nulls_last())
        if all(spec.column != SortColumn.ID for spec in criteria.order):
            clauses.append(LocationModel.id.asc())
        return clauses

    @staticmethod
    def _rating_stats_subquery():
        """위치별 평균 평점(0.5 단위 반올림)과 평점 수."""
        return (
            select(
                LocationRatingModel.location_id.label("location_id"),
                (
                    func.round(cast(func.avg(LocationRatingModel.rating), Numeric) * 2) / 2
                ).label("rating"),
                func.count(LocationRatingModel.id).label("rating_count"),
            )
            .where(LocationRatingModel.deleted.is_(False))
            .group_by(LocationRatingModel.location_id)
            .subquery("rating_stats")
        )

    @classmethod
    def _distance_or_null(cls, origin: Coordinates | None):
        if origin is None:
            return null().label("distance_km")
        return cls.distance_km_expr(origin)

    @staticmethod
    def distance_km_expr(origin: Coordinates):
        """Haversine 거리(km) 표현식. 좌표가 없는 행은 NULL."""
        origin_lat = math.radians(origin.latitude)
        origin_lon = math.radians(origin.longitude)
        latitude = func.radians(LocationModel.long_lat[LATITUDE])
        longitude = func.radians(LocationModel.long_lat[LONGITUDE])

        sin_half_lat = func.sin((latitude - origin_lat) / 2)
        sin_half_lon = func.sin((longitude - origin_lon) / 2)
        haversine = sin_half_lat * sin_half_lat + (
            math.cos(origin_lat) * func.cos(latitude) * sin_half_lon * sin_half_lon
        )
        return (
            2 * EARTH_RADIUS_KM * func.asin(func.least(1.0, func.sqrt(haversine)), type_=Float)
        ).label("distance_km")

    @staticmethod
    def _text_filter(search: str):
        """name/city/address_line1/address_line2 부분 일치 (대소문자 무시)."""
        pattern = escape_like(search)
        return or_(
            LocationModel.name.ilike(pattern, escape=_LIKE_ESCAPE),
            LocationModel.city.ilike(pattern, escape=_LIKE_ESCAPE),
            LocationModel.address_line1.ilike(pattern, escape=_LIKE_ESCAPE),
            LocationModel.address_line2.ilike(pattern, escape=_LIKE_ESCAPE),
        )

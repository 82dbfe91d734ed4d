"""Geo Index Service.

구면 지구 모델 기반 거리 계산과 bounding box 포함 판정.
PostGIS ST_DistanceSphere와 같은 구 반지름을 사용합니다.
SQL 어댑터의 거리 표현식도 같은 상수와 공식을 씁니다.
"""

from __future__ import annotations

import math

from storefront.domain.value_objects import Coordinates

# ST_DistanceSphere 기준 구 반지름 (미터)
EARTH_RADIUS_M = 6_370_986.0
KM_PER_MILE = 1.609344


class GeoIndexService:
    """거리/영역 계산 서비스.

    Port 의존성이 없는 순수 로직입니다.
    """

    @staticmethod
    def distance_km(
        origin_lon: float | None,
        origin_lat: float | None,
        target_lon: float | None,
        target_lat: float | None,
    ) -> float | None:
        """두 좌표 간 대원 거리(km)를 계산합니다.

        어느 한 쪽 좌표라도 없으면 None을 반환합니다.
        """
        if None in (origin_lon, origin_lat, target_lon, target_lat):
            return None
        lat1 = math.radians(origin_lat)
        lat2 = math.radians(target_lat)
        d_lat = lat2 - lat1
        d_lon = math.radians(target_lon - origin_lon)
        a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
        c = 2 * math.asin(min(1.0, math.sqrt(a)))
        return EARTH_RADIUS_M * c / 1000.0

    @classmethod
    def distance_between(
        cls, origin: Coordinates | None, target: Coordinates | None
    ) -> float | None:
        """Coordinates 두 개 사이의 거리(km)."""
        if origin is None or target is None:
            return None
        return cls.distance_km(origin.longitude, origin.latitude, target.longitude, target.latitude)

    @staticmethod
    def within_bounding_box(
        point: Coordinates | None,
        min_lon: float,
        min_lat: float,
        max_lon: float,
        max_lat: float,
    ) -> bool:
        """축 정렬 bounding box 포함 여부 (경계 포함)."""
        if point is None:
            return False
        return min_lon <= point.longitude <= max_lon and min_lat <= point.latitude <= max_lat

    @staticmethod
    def miles_to_km(miles: float) -> float:
        return miles * KM_PER_MILE

    @staticmethod
    def within_radius_miles(distance_km: float | None, miles: float) -> bool:
        """km 거리를 마일로 환산해 반경 이내인지 확인합니다."""
        if distance_km is None:
            return False
        return distance_km / KM_PER_MILE <= miles


def parse_long_lat(text: str | None) -> Coordinates | None:
    """`(lon,lat)` 문자열을 방어적으로 파싱합니다.

    빈 문자열, 숫자가 아닌 값, 괄호 불일치, 범위 초과는 예외 없이 None입니다.
    """
    return Coordinates.try_parse(text)

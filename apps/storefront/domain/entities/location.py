"""Location / Organization Entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from storefront.domain.value_objects import Coordinates


@dataclass(frozen=True)
class Organization:
    """위치를 소유하는 조직 (테넌트)."""

    id: int
    name: str
    pos_id: int | None = None
    allow_off_hours: bool = False


@dataclass(frozen=True)
class Location:
    """매장 위치 엔티티.

    영업시간, 휴일, 배달 규칙, 리뷰의 aggregate root입니다.
    평점/거리 같은 파생 값은 검색 결과 DTO에만 존재합니다.
    """

    id: int | None
    name: str
    organization_id: int | None = None
    pos_id: int | None = None
    description: str | None = None
    thumbnail: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    city: str | None = None
    postal_code: str | None = None
    phone_number: str | None = None
    url: str | None = None
    message: str | None = None
    coordinates: Coordinates | None = None
    timezone: str | None = None
    deleted: bool = False
    is_delivery_available: bool = False
    delivery_mile_radius: float | None = None
    delivery_fee: float | None = None
    priority: int | None = None
    allow_off_hours: bool = False
    created: datetime | None = None
    modified: datetime | None = None
    created_by: int | None = None
    modified_by: int | None = None

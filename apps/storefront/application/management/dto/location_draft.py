"""Location write DTOs."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from datetime import datetime
from typing import Any

from storefront.domain.entities import Location
from storefront.domain.value_objects import Coordinates


@dataclass(frozen=True)
class LocationDraft:
    """위치 생성 요청."""

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
    is_delivery_available: bool = False
    delivery_mile_radius: float | None = None
    delivery_fee: float | None = None
    priority: int | None = None
    allow_off_hours: bool = False

    def to_location(self, created_by: int | None = None, now: datetime | None = None) -> Location:
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        return Location(
            id=None,
            created=now,
            modified=now,
            created_by=created_by,
            modified_by=created_by,
            **values,
        )


@dataclass(frozen=True)
class LocationChanges:
    """위치 수정 요청.

    None인 필드는 변경하지 않습니다.
    좌표를 지우려면 clear_coordinates를 사용합니다.
    """

    name: str | None = None
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
    is_delivery_available: bool | None = None
    delivery_mile_radius: float | None = None
    delivery_fee: float | None = None
    priority: int | None = None
    allow_off_hours: bool | None = None
    clear_coordinates: bool = False

    def provided(self) -> dict[str, Any]:
        """값이 주어진 필드만 반환합니다."""
        values = {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "clear_coordinates"
        }
        provided = {name: value for name, value in values.items() if value is not None}
        if self.clear_coordinates:
            provided["coordinates"] = None
        return provided

    def has_changes(self) -> bool:
        return bool(self.provided())

    def apply(
        self,
        location: Location,
        modified_by: int | None = None,
        now: datetime | None = None,
    ) -> Location:
        return replace(location, modified=now, modified_by=modified_by, **self.provided())

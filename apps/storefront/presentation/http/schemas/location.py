"""Location HTTP Schemas."""

from __future__ import annotations

from datetime import datetime, time

from pydantic import BaseModel, Field

from storefront.application.management.dto import LocationChanges, LocationDraft
from storefront.application.search.dto import HoursTodayDTO, LocationResultDTO
from storefront.domain.entities import HolidayOverride, HourRule, Location
from storefront.domain.value_objects import Coordinates

TIME_FORMAT = "%H:%M:%S"


def format_time(value: time | None) -> str | None:
    return value.strftime(TIME_FORMAT) if value is not None else None


class HoursTodayResponse(BaseModel):
    """오늘의 영업 상태 응답 스키마."""

    is_open: bool
    opens_at: str | None = None
    closes_at: str | None = None
    is_off_hours: bool = False

    @classmethod
    def from_dto(cls, dto: HoursTodayDTO | None) -> HoursTodayResponse | None:
        if dto is None:
            return None
        return cls(
            is_open=dto.is_open,
            opens_at=dto.opens_at,
            closes_at=dto.closes_at,
            is_off_hours=dto.is_off_hours,
        )


class HourRuleResponse(BaseModel):
    """요일 규칙 응답 스키마."""

    id: int | None = None
    location_id: int | None = None
    day_of_week: int
    is_open: bool
    start_time: str | None = None
    end_time: str | None = None

    @classmethod
    def from_entity(cls, rule: HourRule) -> HourRuleResponse:
        return cls(
            id=rule.id,
            location_id=rule.location_id,
            day_of_week=rule.day_of_week,
            is_open=rule.is_open,
            start_time=format_time(rule.start_time),
            end_time=format_time(rule.end_time),
        )


class HolidayResponse(BaseModel):
    """휴일 규칙 응답 스키마."""

    id: int | None = None
    location_id: int | None = None
    date: str
    title: str | None = None
    is_open: bool
    start_time: str | None = None
    end_time: str | None = None

    @classmethod
    def from_entity(cls, holiday: HolidayOverride) -> HolidayResponse:
        return cls(
            id=holiday.id,
            location_id=holiday.location_id,
            date=holiday.date.isoformat(),
            title=holiday.title,
            is_open=holiday.is_open,
            start_time=format_time(holiday.start_time),
            end_time=format_time(holiday.end_time),
        )


class LocationResponse(BaseModel):
    """위치 응답 스키마.

    좌표는 저장 형식과 같은 `(lon,lat)` 문자열(long_lat)로 노출합니다.
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
    long_lat: str | None = None
    timezone: str | None = None
    deleted: bool = False
    is_delivery_available: bool = False
    delivery_mile_radius: float | None = None
    delivery_fee: float | None = None
    priority: int | None = None
    allow_off_hours: bool = False
    created: datetime | None = None
    modified: datetime | None = None

    distance: float | None = None
    rating: float | None = None
    rating_count: int = 0
    hours: list[HourRuleResponse] = Field(default_factory=list)
    delivery_hours: list[HourRuleResponse] = Field(default_factory=list)
    holidays: list[HolidayResponse] | None = None
    hours_today: HoursTodayResponse | None = None
    delivery_hours_today: HoursTodayResponse | None = None

    @classmethod
    def from_entity(cls, location: Location) -> LocationResponse:
        return cls(
            id=location.id,
            name=location.name,
            organization_id=location.organization_id,
            pos_id=location.pos_id,
            description=location.description,
            thumbnail=location.thumbnail,
            address_line1=location.address_line1,
            address_line2=location.address_line2,
            city=location.city,
            postal_code=location.postal_code,
            phone_number=location.phone_number,
            url=location.url,
            message=location.message,
            long_lat=location.coordinates.to_long_lat() if location.coordinates else None,
            timezone=location.timezone,
            deleted=location.deleted,
            is_delivery_available=location.is_delivery_available,
            delivery_mile_radius=location.delivery_mile_radius,
            delivery_fee=location.delivery_fee,
            priority=location.priority,
            allow_off_hours=location.allow_off_hours,
            created=location.created,
            modified=location.modified,
        )

    @classmethod
    def from_dto(cls, dto: LocationResultDTO) -> LocationResponse:
        base = cls.from_entity(dto.location)
        return base.model_copy(
            update={
                "distance": dto.distance,
                "rating": dto.rating,
                "rating_count": dto.rating_count,
                "hours": [HourRuleResponse.from_entity(r) for r in dto.hours],
                "delivery_hours": [HourRuleResponse.from_entity(r) for r in dto.delivery_hours],
                "holidays": (
                    [HolidayResponse.from_entity(h) for h in dto.holidays]
                    if dto.holidays is not None
                    else None
                ),
                "hours_today": HoursTodayResponse.from_dto(dto.hours_today),
                "delivery_hours_today": HoursTodayResponse.from_dto(dto.delivery_hours_today),
            }
        )


class LocationSearchResponse(BaseModel):
    """위치 검색 응답 스키마."""

    items: list[LocationResponse]
    total_count: int


class LocationCountResponse(BaseModel):
    count: int


class LocationCreateRequest(BaseModel):
    """위치 생성 요청 스키마."""

    name: str = Field(..., min_length=1, max_length=255)
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
    long_lat: str | None = Field(None, description="`(longitude,latitude)`")
    timezone: str | None = None
    is_delivery_available: bool = False
    delivery_mile_radius: float | None = Field(None, ge=0)
    delivery_fee: float | None = Field(None, ge=0)
    priority: int | None = None
    allow_off_hours: bool = False

    def to_draft(self) -> LocationDraft:
        """좌표 문자열은 여기서 엄격하게 파싱합니다 (InvalidCoordinatesError)."""
        values = self.model_dump(exclude={"long_lat"})
        coordinates = Coordinates.parse(self.long_lat) if self.long_lat else None
        return LocationDraft(coordinates=coordinates, **values)


class LocationUpdateRequest(BaseModel):
    """위치 수정 요청 스키마. 주어진 필드만 변경합니다."""

    name: str | None = Field(None, min_length=1, max_length=255)
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
    long_lat: str | None = None
    timezone: str | None = None
    is_delivery_available: bool | None = None
    delivery_mile_radius: float | None = Field(None, ge=0)
    delivery_fee: float | None = Field(None, ge=0)
    priority: int | None = None
    allow_off_hours: bool | None = None

    def to_changes(self) -> LocationChanges:
        """`long_lat: null`을 명시하면 좌표를 지웁니다. 빈 문자열은 변경 없음."""
        values = self.model_dump(exclude={"long_lat"})
        coordinates = Coordinates.parse(self.long_lat) if self.long_lat else None
        clear_coordinates = "long_lat" in self.model_fields_set and self.long_lat is None
        return LocationChanges(
            coordinates=coordinates, clear_coordinates=clear_coordinates, **values
        )


class OffHoursRequest(BaseModel):
    allow_off_hours: bool


class OffHoursResponse(BaseModel):
    organization_id: int
    allow_off_hours: bool
    locations_updated: int

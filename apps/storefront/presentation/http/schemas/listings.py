"""Listing HTTP Schemas (쿠폰, 할당 사용자, 활성 딜 집계)."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from storefront.application.listings.dto import LocationActiveDeals
from storefront.domain.entities import Coupon, User


class CouponResponse(BaseModel):
    id: int
    name: str
    code: str | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    @classmethod
    def from_entity(cls, coupon: Coupon) -> CouponResponse:
        return cls(
            id=coupon.id,
            name=coupon.name,
            code=coupon.code,
            description=coupon.description,
            start_date=coupon.start_date,
            end_date=coupon.end_date,
        )


class CouponListResponse(BaseModel):
    items: list[CouponResponse]
    total_count: int


class AssignedUserResponse(BaseModel):
    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    @classmethod
    def from_entity(cls, user: User) -> AssignedUserResponse:
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )


class AssignedUserListResponse(BaseModel):
    items: list[AssignedUserResponse]
    total_count: int


class ActiveDealsResponse(BaseModel):
    id: int
    name: str
    organization_id: int
    organization_name: str
    organization_max_active_deals: int | None = None
    organization_active_deals_count: int

    @classmethod
    def from_dto(cls, dto: LocationActiveDeals) -> ActiveDealsResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            organization_id=dto.organization_id,
            organization_name=dto.organization_name,
            organization_max_active_deals=dto.organization_max_active_deals,
            organization_active_deals_count=dto.organization_active_deals_count,
        )


class ActiveDealsListResponse(BaseModel):
    items: list[ActiveDealsResponse]
    total_count: int

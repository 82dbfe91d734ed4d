"""SQLAlchemy ORM models (schema: storefront)."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from storefront.domain.value_objects import Coordinates
from storefront.infrastructure.persistence_postgres.types import LongLatType

SCHEMA = "storefront"


class Base(DeclarativeBase):
    pass


class OrganizationModel(Base):
    __tablename__ = "organizations"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    pos_id: Mapped[Optional[int]] = mapped_column(BigInteger, index=True)
    allow_off_hours: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    max_active_deals: Mapped[Optional[int]] = mapped_column(Integer)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class LocationModel(Base):
    __tablename__ = "locations"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    organization_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey(f"{SCHEMA}.organizations.id"), index=True
    )
    pos_id: Mapped[Optional[int]] = mapped_column(BigInteger)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    thumbnail: Mapped[Optional[str]] = mapped_column(Text)
    address_line1: Mapped[Optional[str]] = mapped_column(String(255))
    address_line2: Mapped[Optional[str]] = mapped_column(String(255))
    city: Mapped[Optional[str]] = mapped_column(String(128))
    postal_code: Mapped[Optional[str]] = mapped_column(String(32))
    phone_number: Mapped[Optional[str]] = mapped_column(String(32))
    url: Mapped[Optional[str]] = mapped_column(Text)
    message: Mapped[Optional[str]] = mapped_column(Text)
    long_lat: Mapped[Optional[Coordinates]] = mapped_column(LongLatType)
    timezone: Mapped[Optional[str]] = mapped_column(String(64))
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_delivery_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    delivery_mile_radius: Mapped[Optional[float]] = mapped_column(Float)
    delivery_fee: Mapped[Optional[float]] = mapped_column(Float)
    priority: Mapped[Optional[int]] = mapped_column(Integer)
    allow_off_hours: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    created_by: Mapped[Optional[int]] = mapped_column(BigInteger)
    modified_by: Mapped[Optional[int]] = mapped_column(BigInteger)


class UserLocationModel(Base):
    __tablename__ = "user_locations"
    __table_args__ = (
        UniqueConstraint("user_id", "location_id", name="uq_user_locations_user_location"),
        {"schema": SCHEMA},
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class LocationCouponModel(Base):
    __tablename__ = "location_coupons"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    coupon_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class LocationHourModel(Base):
    __tablename__ = "location_hours"
    __table_args__ = (
        UniqueConstraint("location_id", "day_of_week", name="uq_location_hours_day"),
        {"schema": SCHEMA},
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    start_time: Mapped[Optional[time]] = mapped_column(Time)
    end_time: Mapped[Optional[time]] = mapped_column(Time)


class LocationDeliveryHourModel(Base):
    __tablename__ = "location_delivery_hours"
    __table_args__ = (
        UniqueConstraint("location_id", "day_of_week", name="uq_location_delivery_hours_day"),
        {"schema": SCHEMA},
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    day_of_week: Mapped[int] = mapped_column(Integer, nullable=False)
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    start_time: Mapped[Optional[time]] = mapped_column(Time)
    end_time: Mapped[Optional[time]] = mapped_column(Time)


class LocationHolidayModel(Base):
    __tablename__ = "location_holidays"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    holiday_date: Mapped[date] = mapped_column("date", Date, nullable=False, index=True)
    title: Mapped[Optional[str]] = mapped_column(String(255))
    is_open: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    start_time: Mapped[Optional[time]] = mapped_column(Time)
    end_time: Mapped[Optional[time]] = mapped_column(Time)


class DeliveryTimeSlotModel(Base):
    __tablename__ = "delivery_time_slots"
    __table_args__ = (
        UniqueConstraint(
            "location_id", "day_num", "time_slot", name="uq_delivery_time_slots_slot"
        ),
        {"schema": SCHEMA},
    )

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    day: Mapped[str] = mapped_column(String(16), nullable=False)
    day_num: Mapped[int] = mapped_column(Integer, nullable=False)
    time_slot: Mapped[str] = mapped_column(String(64), nullable=False)
    max_orders_per_hour: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class LocationRatingModel(Base):
    __tablename__ = "location_ratings"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    review: Mapped[Optional[str]] = mapped_column(Text)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    created_by: Mapped[Optional[int]] = mapped_column(BigInteger)
    modified_by: Mapped[Optional[int]] = mapped_column(BigInteger)


class MobileCheckInModel(Base):
    __tablename__ = "mobile_check_ins"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    mobile_number: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class ReviewReportModel(Base):
    __tablename__ = "review_reports"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    review_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.location_ratings.id"), nullable=False, index=True
    )
    reported_by: Mapped[int] = mapped_column(BigInteger, nullable=False)
    reason: Mapped[Optional[str]] = mapped_column(Text)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )


class UserModel(Base):
    """사용자 읽기 전용 사본 (할당 사용자 목록용)."""

    __tablename__ = "users"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(128))
    last_name: Mapped[Optional[str]] = mapped_column(String(128))
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class CouponModel(Base):
    __tablename__ = "coupons"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[Optional[str]] = mapped_column(String(64))
    description: Mapped[Optional[str]] = mapped_column(Text)
    start_date: Mapped[Optional[date]] = mapped_column(Date)
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class ProductModel(Base):
    __tablename__ = "products"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    category: Mapped[Optional[str]] = mapped_column(String(64), index=True)
    subcategory: Mapped[Optional[str]] = mapped_column(String(64))
    is_in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    strain_id: Mapped[Optional[int]] = mapped_column(BigInteger)
    strain_name: Mapped[Optional[str]] = mapped_column(String(255))
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    created_by: Mapped[Optional[int]] = mapped_column(BigInteger)
    modified_by: Mapped[Optional[int]] = mapped_column(BigInteger)


class DealModel(Base):
    __tablename__ = "deals"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    timezone: Mapped[Optional[str]] = mapped_column(String(64))
    end_date: Mapped[Optional[date]] = mapped_column(Date)
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)


class LocationDealModel(Base):
    __tablename__ = "location_deals"
    __table_args__ = {"schema": SCHEMA}

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    location_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.locations.id"), nullable=False, index=True
    )
    deal_id: Mapped[int] = mapped_column(
        ForeignKey(f"{SCHEMA}.deals.id"), nullable=False, index=True
    )
    deleted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

"""ORM 모델 ↔ 도메인 엔티티 변환."""

from __future__ import annotations

from storefront.domain.entities import (
    Coupon,
    DeliveryTimeSlot,
    HolidayOverride,
    HourRule,
    Location,
    MobileCheckIn,
    Organization,
    Product,
    Review,
    ReviewReport,
    User,
)
from storefront.infrastructure.persistence_postgres.models import (
    CouponModel,
    DeliveryTimeSlotModel,
    LocationDeliveryHourModel,
    LocationHolidayModel,
    LocationHourModel,
    LocationModel,
    LocationRatingModel,
    MobileCheckInModel,
    OrganizationModel,
    ProductModel,
    ReviewReportModel,
    UserModel,
)

# 도메인 Location 필드 중 ORM 컬럼과 이름이 같은 것
_LOCATION_COLUMNS = (
    "organization_id",
    "pos_id",
    "name",
    "description",
    "thumbnail",
    "address_line1",
    "address_line2",
    "city",
    "postal_code",
    "phone_number",
    "url",
    "message",
    "timezone",
    "deleted",
    "is_delivery_available",
    "delivery_mile_radius",
    "delivery_fee",
    "priority",
    "allow_off_hours",
    "created_by",
    "modified_by",
)


def location_to_domain(model: LocationModel) -> Location:
    return Location(
        id=int(model.id),
        coordinates=model.long_lat,
        created=model.created,
        modified=model.modified,
        **{column: getattr(model, column) for column in _LOCATION_COLUMNS},
    )


def apply_location(model: LocationModel, location: Location) -> LocationModel:
    """도메인 값을 ORM 모델에 복사합니다 (id 제외)."""
    for column in _LOCATION_COLUMNS:
        setattr(model, column, getattr(location, column))
    model.long_lat = location.coordinates
    if location.created is not None:
        model.created = location.created
    if location.modified is not None:
        model.modified = location.modified
    return model


def organization_to_domain(model: OrganizationModel) -> Organization:
    return Organization(
        id=int(model.id),
        name=model.name,
        pos_id=model.pos_id,
        allow_off_hours=bool(model.allow_off_hours),
    )


def hour_to_domain(model: LocationHourModel | LocationDeliveryHourModel) -> HourRule:
    return HourRule(
        id=int(model.id),
        location_id=int(model.location_id),
        day_of_week=model.day_of_week,
        is_open=bool(model.is_open),
        start_time=model.start_time,
        end_time=model.end_time,
    )


def holiday_to_domain(model: LocationHolidayModel) -> HolidayOverride:
    return HolidayOverride(
        id=int(model.id),
        location_id=int(model.location_id),
        date=model.holiday_date,
        title=model.title,
        is_open=bool(model.is_open),
        start_time=model.start_time,
        end_time=model.end_time,
    )


def time_slot_to_domain(model: DeliveryTimeSlotModel) -> DeliveryTimeSlot:
    return DeliveryTimeSlot(
        id=int(model.id),
        location_id=int(model.location_id),
        day=model.day,
        day_num=model.day_num,
        time_slot=model.time_slot,
        max_orders_per_hour=model.max_orders_per_hour,
    )


def review_to_domain(model: LocationRatingModel) -> Review:
    return Review(
        id=int(model.id),
        location_id=int(model.location_id),
        user_id=int(model.user_id),
        rating=float(model.rating),
        review=model.review,
        deleted=bool(model.deleted),
        created=model.created,
        modified=model.modified,
        created_by=model.created_by,
        modified_by=model.modified_by,
    )


def check_in_to_domain(model: MobileCheckInModel) -> MobileCheckIn:
    return MobileCheckIn(
        id=int(model.id),
        location_id=int(model.location_id),
        mobile_number=model.mobile_number,
        created=model.created,
        modified=model.modified,
    )


def report_to_domain(model: ReviewReportModel) -> ReviewReport:
    return ReviewReport(
        id=int(model.id),
        location_id=int(model.location_id),
        review_id=int(model.review_id),
        reported_by=int(model.reported_by),
        reason=model.reason,
        created=model.created,
    )


# 도메인 Product 필드 중 ORM 컬럼과 이름이 같은 것
_PRODUCT_COLUMNS = (
    "location_id",
    "name",
    "description",
    "category",
    "subcategory",
    "is_in_stock",
    "hidden",
    "strain_id",
    "strain_name",
    "deleted",
    "created_by",
    "modified_by",
)


def product_to_domain(model: ProductModel) -> Product:
    return Product(
        id=int(model.id),
        created=model.created,
        modified=model.modified,
        **{column: getattr(model, column) for column in _PRODUCT_COLUMNS},
    )


def apply_product(model: ProductModel, product: Product) -> ProductModel:
    """도메인 값을 ORM 모델에 복사합니다 (id 제외)."""
    for column in _PRODUCT_COLUMNS:
        setattr(model, column, getattr(product, column))
    if product.created is not None:
        model.created = product.created
    if product.modified is not None:
        model.modified = product.modified
    return model


def coupon_to_domain(model: CouponModel) -> Coupon:
    return Coupon(
        id=int(model.id),
        name=model.name,
        code=model.code,
        description=model.description,
        start_date=model.start_date,
        end_date=model.end_date,
        deleted=bool(model.deleted),
    )


def user_to_domain(model: UserModel) -> User:
    return User(
        id=int(model.id),
        first_name=model.first_name,
        last_name=model.last_name,
        email=model.email,
        deleted=bool(model.deleted),
    )

"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.application.catalog.commands import (
    CreateProductInteractor,
    RemoveProductInteractor,
    UpdateProductInteractor,
)
from storefront.application.catalog.ports import ProductCommandGateway, ProductQueryGateway
from storefront.application.catalog.queries import GetProductQuery, ListProductsQuery
from storefront.application.check_in.commands import CheckInInteractor
from storefront.application.check_in.ports import CheckInCommandGateway, CheckInQueryGateway
from storefront.application.check_in.queries import GetCheckInQuery
from storefront.application.common.dto import ActingUser
from storefront.application.common.ports import TransactionManager
from storefront.application.hours.commands import (
    SaveDeliveryTimeSlotsInteractor,
    SaveLocationHoursInteractor,
)
from storefront.application.hours.ports import DeliveryTimeSlotGateway, HoursCommandGateway
from storefront.application.hours.queries import (
    GetDeliveryTimeSlotsQuery,
    GetHolidaysQuery,
    GetLocationHoursQuery,
)
from storefront.application.listings.ports import (
    ActiveDealsReader,
    AssignedUserReader,
    CouponReader,
)
from storefront.application.listings.queries import (
    ListActiveDealsCountQuery,
    ListAssignedUsersQuery,
    ListLocationCouponsQuery,
)
from storefront.application.management.commands import (
    CreateLocationInteractor,
    RemoveLocationInteractor,
    UpdateLocationInteractor,
    UpdateOffHoursInteractor,
)
from storefront.application.management.ports import LocationCommandGateway, TimezoneLookupPort
from storefront.application.reviews.commands import (
    CreateReviewInteractor,
    ReportReviewInteractor,
    UpdateReviewInteractor,
)
from storefront.application.reviews.ports import (
    ReviewCommandGateway,
    ReviewQueryGateway,
    ReviewReportGateway,
)
from storefront.application.reviews.queries import GetReviewQuery, ListReviewsQuery
from storefront.application.search.ports import HoursReader, LocationReader, OrganizationReader
from storefront.application.search.queries import (
    CountLocationsQuery,
    GetHoursTodayQuery,
    GetLocationQuery,
    GetNearestLocationQuery,
    SearchLocationsQuery,
)
from storefront.application.search.services import LocationEnricher
from storefront.domain.enums import HourKind, UserRole
from storefront.infrastructure.integrations.google import GoogleTimezoneHttpClient
from storefront.infrastructure.persistence_postgres import (
    SqlaActiveDealsReader,
    SqlaAssignedUserReader,
    SqlaCheckInCommandGateway,
    SqlaCheckInQueryGateway,
    SqlaCouponReader,
    SqlaDeliveryTimeSlotGateway,
    SqlaHoursCommandGateway,
    SqlaHoursReader,
    SqlaLocationCommandGateway,
    SqlaLocationReader,
    SqlaOrganizationReader,
    SqlaProductCommandGateway,
    SqlaProductQueryGateway,
    SqlaReviewCommandGateway,
    SqlaReviewQueryGateway,
    SqlaReviewReportGateway,
    SqlaTransactionManager,
)
from storefront.setup.config import get_settings
from storefront.setup.database import get_db_session

logger = logging.getLogger(__name__)

_timezone_client: GoogleTimezoneHttpClient | None = None

Session = Annotated[AsyncSession, Depends(get_db_session)]


def get_timezone_client() -> TimezoneLookupPort | None:
    """Google Time Zone 클라이언트 싱글톤을 반환합니다."""
    global _timezone_client  # noqa: PLW0603
    if _timezone_client is None:
        settings = get_settings()
        if settings.google_maps_api_key:
            _timezone_client = GoogleTimezoneHttpClient(
                api_key=settings.google_maps_api_key,
                timeout=settings.google_api_timeout,
            )
            logger.info("Google timezone HTTP client created")
        else:
            logger.warning("STOREFRONT_GOOGLE_MAPS_API_KEY not set, timezone lookup disabled")
    return _timezone_client


async def close_timezone_client() -> None:
    """애플리케이션 종료 시 HTTP 클라이언트를 닫습니다."""
    global _timezone_client  # noqa: PLW0603
    if _timezone_client is not None:
        await _timezone_client.close()
        _timezone_client = None


def get_acting_user(
    x_user_id: Annotated[int | None, Header()] = None,
    x_user_role: Annotated[UserRole | None, Header()] = None,
) -> ActingUser:
    """게이트웨이가 전달한 사용자 헤더를 읽습니다."""
    return ActingUser(user_id=x_user_id, role=x_user_role)


# -----------------------------------------------------------------------------
# Adapters
# -----------------------------------------------------------------------------


async def get_location_reader(session: Session) -> LocationReader:
    return SqlaLocationReader(session)


async def get_organization_reader(session: Session) -> OrganizationReader:
    return SqlaOrganizationReader(session)


async def get_hours_reader(session: Session) -> HoursReader:
    return SqlaHoursReader(session)


async def get_hours_command(session: Session) -> HoursCommandGateway:
    return SqlaHoursCommandGateway(session)


async def get_slot_gateway(session: Session) -> DeliveryTimeSlotGateway:
    return SqlaDeliveryTimeSlotGateway(session)


async def get_location_command(session: Session) -> LocationCommandGateway:
    return SqlaLocationCommandGateway(session)


async def get_review_query_gateway(session: Session) -> ReviewQueryGateway:
    return SqlaReviewQueryGateway(session)


async def get_review_command_gateway(session: Session) -> ReviewCommandGateway:
    return SqlaReviewCommandGateway(session)


async def get_review_report_gateway(session: Session) -> ReviewReportGateway:
    return SqlaReviewReportGateway(session)


async def get_product_query_gateway(session: Session) -> ProductQueryGateway:
    return SqlaProductQueryGateway(session)


async def get_product_command_gateway(session: Session) -> ProductCommandGateway:
    return SqlaProductCommandGateway(session)


async def get_coupon_reader(session: Session) -> CouponReader:
    return SqlaCouponReader(session)


async def get_assigned_user_reader(session: Session) -> AssignedUserReader:
    return SqlaAssignedUserReader(session)


async def get_active_deals_reader(session: Session) -> ActiveDealsReader:
    return SqlaActiveDealsReader(session)


async def get_check_in_query_gateway(session: Session) -> CheckInQueryGateway:
    return SqlaCheckInQueryGateway(session)


async def get_check_in_command_gateway(session: Session) -> CheckInCommandGateway:
    return SqlaCheckInCommandGateway(session)


async def get_transaction_manager(session: Session) -> TransactionManager:
    return SqlaTransactionManager(session)


LocationReaderDep = Annotated[LocationReader, Depends(get_location_reader)]
OrganizationReaderDep = Annotated[OrganizationReader, Depends(get_organization_reader)]
HoursReaderDep = Annotated[HoursReader, Depends(get_hours_reader)]
LocationCommandDep = Annotated[LocationCommandGateway, Depends(get_location_command)]
ReviewQueryDep = Annotated[ReviewQueryGateway, Depends(get_review_query_gateway)]
ReviewCommandDep = Annotated[ReviewCommandGateway, Depends(get_review_command_gateway)]
ProductQueryDep = Annotated[ProductQueryGateway, Depends(get_product_query_gateway)]
ProductCommandDep = Annotated[ProductCommandGateway, Depends(get_product_command_gateway)]
TransactionDep = Annotated[TransactionManager, Depends(get_transaction_manager)]
TimezoneLookupDep = Annotated[TimezoneLookupPort | None, Depends(get_timezone_client)]


# -----------------------------------------------------------------------------
# Search
# -----------------------------------------------------------------------------


async def get_location_enricher(
    location_reader: LocationReaderDep,
    hours_reader: HoursReaderDep,
    organization_reader: OrganizationReaderDep,
) -> LocationEnricher:
    """LocationEnricher를 주입합니다."""
    return LocationEnricher(
        location_reader,
        hours_reader,
        organization_reader,
        delivery_time_format=get_settings().delivery_hours_format,
    )


EnricherDep = Annotated[LocationEnricher, Depends(get_location_enricher)]


async def get_search_locations_query(
    location_reader: LocationReaderDep, enricher: EnricherDep
) -> SearchLocationsQuery:
    """SearchLocationsQuery를 주입합니다."""
    return SearchLocationsQuery(location_reader, enricher)


async def get_nearest_location_query(
    search_query: Annotated[SearchLocationsQuery, Depends(get_search_locations_query)],
    organization_reader: OrganizationReaderDep,
) -> GetNearestLocationQuery:
    """GetNearestLocationQuery를 주입합니다."""
    return GetNearestLocationQuery(
        search_query,
        organization_reader,
        mile_radius=get_settings().nearest_mile_radius,
    )


async def get_location_query(
    location_reader: LocationReaderDep, enricher: EnricherDep
) -> GetLocationQuery:
    return GetLocationQuery(location_reader, enricher)


async def get_count_locations_query(location_reader: LocationReaderDep) -> CountLocationsQuery:
    return CountLocationsQuery(location_reader)


async def get_hours_today_query(
    location_reader: LocationReaderDep,
    hours_reader: HoursReaderDep,
    organization_reader: OrganizationReaderDep,
) -> GetHoursTodayQuery:
    return GetHoursTodayQuery(location_reader, hours_reader, organization_reader)


# -----------------------------------------------------------------------------
# Hours
# -----------------------------------------------------------------------------


async def get_location_hours_query(
    location_reader: LocationReaderDep, hours_reader: HoursReaderDep
) -> GetLocationHoursQuery:
    return GetLocationHoursQuery(location_reader, hours_reader, HourKind.REGULAR)


async def get_delivery_hours_query(
    location_reader: LocationReaderDep, hours_reader: HoursReaderDep
) -> GetLocationHoursQuery:
    return GetLocationHoursQuery(location_reader, hours_reader, HourKind.DELIVERY)


async def get_holidays_query(
    location_reader: LocationReaderDep, hours_reader: HoursReaderDep
) -> GetHolidaysQuery:
    return GetHolidaysQuery(location_reader, hours_reader)


async def get_time_slots_query(
    location_reader: LocationReaderDep,
    slot_gateway: Annotated[DeliveryTimeSlotGateway, Depends(get_slot_gateway)],
) -> GetDeliveryTimeSlotsQuery:
    return GetDeliveryTimeSlotsQuery(location_reader, slot_gateway)


async def get_save_hours_interactor(
    location_reader: LocationReaderDep,
    hours_command: Annotated[HoursCommandGateway, Depends(get_hours_command)],
    tx: TransactionDep,
) -> SaveLocationHoursInteractor:
    return SaveLocationHoursInteractor(location_reader, hours_command, tx, HourKind.REGULAR)


async def get_save_delivery_hours_interactor(
    location_reader: LocationReaderDep,
    hours_command: Annotated[HoursCommandGateway, Depends(get_hours_command)],
    tx: TransactionDep,
) -> SaveLocationHoursInteractor:
    return SaveLocationHoursInteractor(location_reader, hours_command, tx, HourKind.DELIVERY)


async def get_save_time_slots_interactor(
    location_reader: LocationReaderDep,
    slot_gateway: Annotated[DeliveryTimeSlotGateway, Depends(get_slot_gateway)],
    tx: TransactionDep,
) -> SaveDeliveryTimeSlotsInteractor:
    return SaveDeliveryTimeSlotsInteractor(location_reader, slot_gateway, tx)


# -----------------------------------------------------------------------------
# Management
# -----------------------------------------------------------------------------


async def get_create_location_interactor(
    location_command: LocationCommandDep,
    organization_reader: OrganizationReaderDep,
    tx: TransactionDep,
    timezone_lookup: TimezoneLookupDep,
) -> CreateLocationInteractor:
    return CreateLocationInteractor(location_command, organization_reader, tx, timezone_lookup)


async def get_update_location_interactor(
    location_reader: LocationReaderDep,
    location_command: LocationCommandDep,
    organization_reader: OrganizationReaderDep,
    tx: TransactionDep,
    timezone_lookup: TimezoneLookupDep,
) -> UpdateLocationInteractor:
    return UpdateLocationInteractor(
        location_reader, location_command, organization_reader, tx, timezone_lookup
    )


async def get_remove_location_interactor(
    location_reader: LocationReaderDep,
    location_command: LocationCommandDep,
    tx: TransactionDep,
) -> RemoveLocationInteractor:
    return RemoveLocationInteractor(location_reader, location_command, tx)


async def get_update_off_hours_interactor(
    organization_reader: OrganizationReaderDep,
    location_command: LocationCommandDep,
    tx: TransactionDep,
) -> UpdateOffHoursInteractor:
    return UpdateOffHoursInteractor(organization_reader, location_command, tx)


# -----------------------------------------------------------------------------
# Reviews
# -----------------------------------------------------------------------------


async def get_create_review_interactor(
    location_reader: LocationReaderDep,
    review_query: ReviewQueryDep,
    review_command: ReviewCommandDep,
    tx: TransactionDep,
) -> CreateReviewInteractor:
    return CreateReviewInteractor(
        location_reader,
        review_query,
        review_command,
        tx,
        interval_days=get_settings().review_interval_days,
    )


async def get_update_review_interactor(
    review_query: ReviewQueryDep,
    review_command: ReviewCommandDep,
    tx: TransactionDep,
) -> UpdateReviewInteractor:
    return UpdateReviewInteractor(review_query, review_command, tx)


async def get_review_query(review_query: ReviewQueryDep) -> GetReviewQuery:
    return GetReviewQuery(review_query)


async def get_list_reviews_query(review_query: ReviewQueryDep) -> ListReviewsQuery:
    return ListReviewsQuery(review_query)


async def get_report_review_interactor(
    review_query: ReviewQueryDep,
    report_gateway: Annotated[ReviewReportGateway, Depends(get_review_report_gateway)],
    tx: TransactionDep,
) -> ReportReviewInteractor:
    return ReportReviewInteractor(review_query, report_gateway, tx)


# -----------------------------------------------------------------------------
# Catalog
# -----------------------------------------------------------------------------


async def get_list_products_query(product_query: ProductQueryDep) -> ListProductsQuery:
    return ListProductsQuery(product_query)


async def get_product_query(product_query: ProductQueryDep) -> GetProductQuery:
    return GetProductQuery(product_query)


async def get_create_product_interactor(
    location_reader: LocationReaderDep,
    product_command: ProductCommandDep,
    tx: TransactionDep,
) -> CreateProductInteractor:
    return CreateProductInteractor(location_reader, product_command, tx)


async def get_update_product_interactor(
    location_reader: LocationReaderDep,
    product_query: ProductQueryDep,
    product_command: ProductCommandDep,
    tx: TransactionDep,
) -> UpdateProductInteractor:
    return UpdateProductInteractor(location_reader, product_query, product_command, tx)


async def get_remove_product_interactor(
    location_reader: LocationReaderDep,
    product_query: ProductQueryDep,
    product_command: ProductCommandDep,
    tx: TransactionDep,
) -> RemoveProductInteractor:
    return RemoveProductInteractor(location_reader, product_query, product_command, tx)


# -----------------------------------------------------------------------------
# Listings
# -----------------------------------------------------------------------------


async def get_location_coupons_query(
    coupon_reader: Annotated[CouponReader, Depends(get_coupon_reader)],
) -> ListLocationCouponsQuery:
    return ListLocationCouponsQuery(coupon_reader)


async def get_assigned_users_query(
    user_reader: Annotated[AssignedUserReader, Depends(get_assigned_user_reader)],
) -> ListAssignedUsersQuery:
    return ListAssignedUsersQuery(user_reader)


async def get_active_deals_count_query(
    reader: Annotated[ActiveDealsReader, Depends(get_active_deals_reader)],
) -> ListActiveDealsCountQuery:
    return ListActiveDealsCountQuery(reader)


# -----------------------------------------------------------------------------
# Check-in
# -----------------------------------------------------------------------------


async def get_check_in_interactor(
    location_reader: LocationReaderDep,
    check_in_query: Annotated[CheckInQueryGateway, Depends(get_check_in_query_gateway)],
    check_in_command: Annotated[CheckInCommandGateway, Depends(get_check_in_command_gateway)],
    tx: TransactionDep,
) -> CheckInInteractor:
    return CheckInInteractor(location_reader, check_in_query, check_in_command, tx)


async def get_check_in_query(
    check_in_query: Annotated[CheckInQueryGateway, Depends(get_check_in_query_gateway)],
) -> GetCheckInQuery:
    return GetCheckInQuery(check_in_query)

"""PostgreSQL Infrastructure."""

from storefront.infrastructure.persistence_postgres.check_in_gateway_sqla import (
    SqlaCheckInCommandGateway,
    SqlaCheckInQueryGateway,
)
from storefront.infrastructure.persistence_postgres.hours_sqla import (
    SqlaDeliveryTimeSlotGateway,
    SqlaHoursCommandGateway,
    SqlaHoursReader,
)
from storefront.infrastructure.persistence_postgres.listing_readers_sqla import (
    SqlaActiveDealsReader,
    SqlaAssignedUserReader,
    SqlaCouponReader,
)
from storefront.infrastructure.persistence_postgres.location_command_sqla import (
    SqlaLocationCommandGateway,
)
from storefront.infrastructure.persistence_postgres.location_reader_sqla import (
    SqlaLocationReader,
)
from storefront.infrastructure.persistence_postgres.models import Base
from storefront.infrastructure.persistence_postgres.organization_reader_sqla import (
    SqlaOrganizationReader,
)
from storefront.infrastructure.persistence_postgres.product_gateway_sqla import (
    SqlaProductCommandGateway,
    SqlaProductQueryGateway,
)
from storefront.infrastructure.persistence_postgres.review_gateway_sqla import (
    SqlaReviewCommandGateway,
    SqlaReviewQueryGateway,
    SqlaReviewReportGateway,
)
from storefront.infrastructure.persistence_postgres.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "Base",
    "SqlaActiveDealsReader",
    "SqlaAssignedUserReader",
    "SqlaCheckInCommandGateway",
    "SqlaCheckInQueryGateway",
    "SqlaCouponReader",
    "SqlaDeliveryTimeSlotGateway",
    "SqlaHoursCommandGateway",
    "SqlaHoursReader",
    "SqlaLocationCommandGateway",
    "SqlaLocationReader",
    "SqlaOrganizationReader",
    "SqlaProductCommandGateway",
    "SqlaProductQueryGateway",
    "SqlaReviewCommandGateway",
    "SqlaReviewQueryGateway",
    "SqlaReviewReportGateway",
    "SqlaTransactionManager",
]

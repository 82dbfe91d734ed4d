"""Sort Enums."""

from enum import Enum


class SortColumn(str, Enum):
    """정렬 가능한 위치 컬럼 (닫힌 열거형)."""

    ID = "id"
    NAME = "name"
    CITY = "city"
    PRIORITY = "priority"
    CREATED = "created"
    MODIFIED = "modified"
    RATING = "rating"
    RATING_COUNT = "rating_count"
    DISTANCE = "distance"


class SortDirection(str, Enum):
    """정렬 방향."""

    ASC = "ASC"
    DESC = "DESC"


class ProductSortColumn(str, Enum):
    """정렬 가능한 상품 컬럼."""

    ID = "id"
    NAME = "name"
    CATEGORY = "category"
    CREATED = "created"
    MODIFIED = "modified"


class ActiveDealsSortColumn(str, Enum):
    """활성 딜 집계 목록의 정렬 컬럼."""

    ID = "id"
    NAME = "name"
    ORG_ACTIVE_DEALS_COUNT = "org_active_deals_count"

"""Custom column types."""

from __future__ import annotations

import logging

from sqlalchemy import Float, Integer, literal_column
from sqlalchemy.sql import operators
from sqlalchemy.types import Indexable, UserDefinedType

from storefront.domain.exceptions import InvalidCoordinatesError
from storefront.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

LONGITUDE = 0
LATITUDE = 1


class LongLatType(Indexable, UserDefinedType):
    """Coordinates ↔ PostgreSQL `point` 컬럼 (x=경도, y=위도).

    `column[0]`/`column[1]`은 SQL에서 `long_lat[0]`/`long_lat[1]`로 렌더링되어
    거리/영역 표현식에 쓰입니다.
    asyncpg는 (x, y) 튜플을, 그 외 드라이버는 `(lon,lat)` 문자열을 주고받습니다.
    저장된 값이 손상되었으면 좌표 없음(None)으로 읽습니다.
    """

    cache_ok = True

    class Comparator(Indexable.Comparator):
        def _setup_getitem(self, index):
            return operators.getitem, literal_column(str(int(index)), Integer), Float()

    comparator_factory = Comparator

    def get_col_spec(self, **kw) -> str:
        return "POINT"

    def bind_processor(self, dialect):
        as_pair = dialect.driver == "asyncpg"

        def process(value: Coordinates | None):
            if value is None:
                return None
            if as_pair:
                return (value.longitude, value.latitude)
            return value.to_long_lat()

        return process

    def result_processor(self, dialect, coltype):
        def process(value) -> Coordinates | None:
            if value is None or value == "":
                return None
            if isinstance(value, str):
                coordinates = Coordinates.try_parse(value)
            else:
                try:
                    coordinates = Coordinates(
                        longitude=float(value[LONGITUDE]), latitude=float(value[LATITUDE])
                    )
                except (InvalidCoordinatesError, TypeError, ValueError, IndexError):
                    coordinates = None
            if coordinates is None:
                logger.warning("Stored long_lat could not be parsed", extra={"long_lat": value})
            return coordinates

        return process

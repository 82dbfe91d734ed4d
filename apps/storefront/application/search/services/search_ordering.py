"""Search Ordering Service.

정렬 표현식 파싱과 결과 정렬.
정렬 컬럼은 닫힌 열거형(SortColumn)으로만 허용합니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Sequence

from storefront.application.common.exceptions import InvalidOrderError
from storefront.application.search.dto import SortSpec
from storefront.domain.entities import Location
from storefront.domain.enums import SortColumn, SortDirection

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass
class RankedRow:
    """정렬 대상 행."""

    location: Location
    distance: float | None = None
    rating: float | None = None
    rating_count: int = 0


class SearchOrderingService:
    """정렬 정책 서비스."""

    @staticmethod
    def parse(raw: str | None, columns: type[Enum] = SortColumn) -> tuple[SortSpec, ...]:
        """`name ASC, priority DESC` 형식의 정렬 표현식을 파싱합니다.

        camelCase 컬럼명(ratingCount)도 허용합니다.
        columns로 목록별 정렬 컬럼 열거형(상품, 딜 집계)을 지정합니다.

        Raises:
            InvalidOrderError: 알 수 없는 컬럼 또는 방향
        """
        if raw is None or not raw.strip():
            return ()
        allowed = [c.value for c in columns]
        specs: list[SortSpec] = []
        for token in raw.split(","):
            parts = token.split()
            if not parts:
                continue
            if len(parts) > 2:
                raise InvalidOrderError(value=token.strip(), allowed=allowed)
            column_name = parts[0]
            if not column_name.isupper():
                column_name = _CAMEL_BOUNDARY.sub("_", column_name)
            column_name = column_name.lower()
            try:
                column = columns(column_name)
            except ValueError:
                raise InvalidOrderError(value=token.strip(), allowed=allowed) from None
            direction = SortDirection.ASC
            if len(parts) == 2:
                try:
                    direction = SortDirection(parts[1].upper())
                except ValueError:
                    raise InvalidOrderError(value=token.strip(), allowed=allowed) from None
            specs.append(SortSpec(column=column, direction=direction))
        return tuple(specs)

    @staticmethod
    def default_specs(has_origin: bool) -> tuple[SortSpec, ...]:
        """명시적 정렬이 없을 때의 기본 정책.

        출발 좌표가 있으면 priority → distance, 없으면 priority → name.
        """
        if has_origin:
            return (
                SortSpec(SortColumn.PRIORITY),
                SortSpec(SortColumn.DISTANCE),
                SortSpec(SortColumn.NAME),
                SortSpec(SortColumn.ID),
            )
        return (
            SortSpec(SortColumn.PRIORITY),
            SortSpec(SortColumn.NAME),
            SortSpec(SortColumn.ID),
        )

    @classmethod
    def rank(cls, rows: Sequence[RankedRow], specs: Sequence[SortSpec]) -> list[RankedRow]:
        """정렬 키를 메모리에서 순서대로 적용합니다.

        SQL 어댑터의 ORDER BY와 같은 규칙입니다 (텍스트는 대소문자 무시).
        NULL 값은 방향과 관계없이 항상 마지막입니다.
        뒤쪽 키부터 안정 정렬을 반복해 다중 키 정렬을 구성합니다.
        """
        ranked = list(rows)
        for spec in reversed(specs):
            getter = _GETTERS[spec.column]
            present = [row for row in ranked if getter(row) is not None]
            missing = [row for row in ranked if getter(row) is None]
            present.sort(key=getter, reverse=spec.descending)
            ranked = present + missing
        return ranked


def _text(value: str | None) -> str | None:
    return value.casefold() if value is not None else None


def _timestamp(value: datetime | None) -> float | None:
    return value.timestamp() if value is not None else None


_GETTERS: dict[SortColumn, Callable[[RankedRow], Any]] = {
    SortColumn.ID: lambda row: row.location.id,
    SortColumn.NAME: lambda row: _text(row.location.name),
    SortColumn.CITY: lambda row: _text(row.location.city),
    SortColumn.PRIORITY: lambda row: row.location.priority,
    SortColumn.CREATED: lambda row: _timestamp(row.location.created),
    SortColumn.MODIFIED: lambda row: _timestamp(row.location.modified),
    SortColumn.RATING: lambda row: row.rating,
    SortColumn.RATING_COUNT: lambda row: row.rating_count,
    SortColumn.DISTANCE: lambda row: row.distance,
}

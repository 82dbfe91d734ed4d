"""Coordinates Value Object."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from storefront.domain.exceptions.location import InvalidCoordinatesError

# "(lon,lat)" 저장/전송 형식
_LONG_LAT_PATTERN = re.compile(r"^\((.*),(.*)\)$")


@dataclass(frozen=True)
class Coordinates:
    """경도/위도 좌표 Value Object.

    경도 [-180, 180], 위도 [-90, 90] 범위를 벗어나면 생성할 수 없습니다.
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        if not _is_finite(self.latitude) or not -90 <= self.latitude <= 90:
            raise InvalidCoordinatesError(f"Invalid latitude: {self.latitude}")
        if not _is_finite(self.longitude) or not -180 <= self.longitude <= 180:
            raise InvalidCoordinatesError(f"Invalid longitude: {self.longitude}")

    @classmethod
    def parse(cls, text: str) -> Coordinates:
        """`(lon,lat)` 문자열을 엄격하게 파싱합니다.

        Raises:
            InvalidCoordinatesError: 형식 또는 범위 오류
        """
        match = _LONG_LAT_PATTERN.match(text.strip()) if text else None
        if match is None:
            raise InvalidCoordinatesError(f"Malformed coordinate pair: {text!r}")
        try:
            longitude = float(match.group(1))
            latitude = float(match.group(2))
        except ValueError:
            raise InvalidCoordinatesError(f"Non-numeric coordinate pair: {text!r}") from None
        return cls(longitude=longitude, latitude=latitude)

    @classmethod
    def try_parse(cls, text: str | None) -> Coordinates | None:
        """파싱에 실패하면 예외 대신 None을 반환합니다."""
        if not text:
            return None
        try:
            return cls.parse(text)
        except InvalidCoordinatesError:
            return None

    def to_long_lat(self) -> str:
        """`(lon,lat)` 문자열로 변환합니다."""
        return f"({self.longitude},{self.latitude})"


def _is_finite(value: float) -> bool:
    return isinstance(value, (int, float)) and math.isfinite(value)

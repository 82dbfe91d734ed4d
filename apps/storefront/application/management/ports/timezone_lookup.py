"""Timezone Lookup Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.value_objects import Coordinates


class TimezoneLookupPort(ABC):
    """좌표 → IANA 시간대 조회 포트.

    위치 생성/수정 시 시간대가 비어 있을 때만 사용합니다.
    """

    @abstractmethod
    async def lookup(self, coordinates: Coordinates) -> str:
        """좌표의 IANA 시간대를 반환합니다.

        Raises:
            TimezoneLookupError: 외부 서비스 실패
        """
        ...

"""Organization Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Sequence

from storefront.domain.entities import Organization


class OrganizationReader(ABC):
    """조직 조회 포트."""

    @abstractmethod
    async def find_by_id(self, organization_id: int) -> Organization | None:
        ...

    @abstractmethod
    async def find_by_pos_id(self, pos_id: int) -> Organization | None:
        """외부 POS 식별자로 조직을 조회합니다."""
        ...

    @abstractmethod
    async def find_by_ids(self, organization_ids: Sequence[int]) -> Mapping[int, Organization]:
        """여러 조직을 일괄 조회합니다."""
        ...

"""Mobile Check-In Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class MobileCheckIn:
    """휴대폰 번호 기반 매장 체크인."""

    location_id: int
    mobile_number: str
    created: datetime | None = None
    modified: datetime | None = None
    id: int | None = None

    @property
    def checked_in_at(self) -> datetime | None:
        """체크인 시각 (수정 시각 우선)."""
        return self.modified or self.created

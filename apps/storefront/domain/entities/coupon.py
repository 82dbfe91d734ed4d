"""Coupon Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class Coupon:
    """위치에 연결된 쿠폰."""

    id: int
    name: str
    code: str | None = None
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    deleted: bool = False

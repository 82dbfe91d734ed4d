"""Product Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Product:
    """위치에 진열된 상품.

    숨김(hidden) 상품과 재고 없는 상품은 기본 목록에서 제외됩니다.
    """

    location_id: int
    name: str
    description: str | None = None
    category: str | None = None
    subcategory: str | None = None
    is_in_stock: bool = True
    hidden: bool = False
    strain_id: int | None = None
    strain_name: str | None = None
    deleted: bool = False
    created: datetime | None = None
    modified: datetime | None = None
    created_by: int | None = None
    modified_by: int | None = None
    id: int | None = None

"""User Entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """위치에 할당될 수 있는 사용자 (읽기 전용 사본)."""

    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    deleted: bool = False

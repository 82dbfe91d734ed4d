"""Transaction Manager Port."""

from __future__ import annotations

from typing import Protocol


class TransactionManager(Protocol):
    """요청 단위 작업을 확정/취소하는 포트.

    Interactor는 모든 검증과 쓰기가 끝난 뒤 한 번만 commit 합니다.
    """

    async def commit(self) -> None:
        """요청에서 쌓인 변경을 확정합니다."""
        ...

    async def rollback(self) -> None:
        """요청에서 쌓인 변경을 버립니다."""
        ...

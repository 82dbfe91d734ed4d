"""SQLAlchemy Transaction Manager."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class SqlaTransactionManager:
    """요청 세션 위의 TransactionManager 구현.

    Gateway들과 같은 AsyncSession을 공유하므로 commit 한 번으로
    한 요청의 모든 쓰기가 함께 반영됩니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        await self._session.commit()

    async def rollback(self) -> None:
        logger.debug("Rolling back storefront session")
        await self._session.rollback()

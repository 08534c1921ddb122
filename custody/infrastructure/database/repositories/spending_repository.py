"""SQLAlchemy implementation for spending buckets."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import SpendingBucket


class SqlSpendingRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_spent(self, period: str, bucket: int) -> int:
        model = await self._session.get(SpendingBucket, (period, bucket))
        return int(model.spent) if model else 0

    async def add_spent(self, period: str, bucket: int, amount: int) -> int:
        model = await self._session.get(SpendingBucket, (period, bucket))
        if model is None:
            model = SpendingBucket(period=period, bucket=bucket, spent=0)
            self._session.add(model)
        model.spent = int(model.spent) + amount
        await self._session.flush()
        return int(model.spent)

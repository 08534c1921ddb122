"""Spending limit enforcer over day and month buckets."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.repositories.spending_repository import SqlSpendingRepository
from custody.modules.common.exceptions import LimitExceededError
from custody.modules.system.models import SystemLimits

from .models import SpendingPeriod, SpendingSummary, day_bucket, month_bucket
from .repository import SpendingRepository


@dataclass(slots=True)
class SpendingLimitEnforcer:
    repository: SpendingRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "SpendingLimitEnforcer":
        return cls(SqlSpendingRepository(session))

    async def check(self, amount: int, now: int, limits: SystemLimits) -> None:
        """Raise ``LimitExceededError`` if ``amount`` would overrun either cap."""
        day = day_bucket(now)
        daily_spent = await self.repository.get_spent(SpendingPeriod.DAY.value, day)
        if daily_spent + amount > limits.daily_limit:
            raise LimitExceededError("daily", daily_spent, amount, limits.daily_limit)

        month = month_bucket(now)
        monthly_spent = await self.repository.get_spent(SpendingPeriod.MONTH.value, month)
        if monthly_spent + amount > limits.monthly_limit:
            raise LimitExceededError("monthly", monthly_spent, amount, limits.monthly_limit)

    async def record(self, amount: int, now: int) -> None:
        await self.repository.add_spent(SpendingPeriod.DAY.value, day_bucket(now), amount)
        await self.repository.add_spent(SpendingPeriod.MONTH.value, month_bucket(now), amount)

    async def summary(self, now: int, limits: SystemLimits) -> SpendingSummary:
        day = day_bucket(now)
        month = month_bucket(now)
        return SpendingSummary(
            day=day,
            month=month,
            daily_spent=await self.repository.get_spent(SpendingPeriod.DAY.value, day),
            monthly_spent=await self.repository.get_spent(SpendingPeriod.MONTH.value, month),
            daily_limit=limits.daily_limit,
            monthly_limit=limits.monthly_limit,
        )

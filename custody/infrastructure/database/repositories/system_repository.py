"""SQLAlchemy implementation for system configuration."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import SINGLETON_ID, SystemConfig
from custody.modules.common.exceptions import NotInitializedError


class SqlSystemRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_config(self) -> SystemConfig | None:
        return await self._session.get(SystemConfig, SINGLETON_ID)

    async def create_config(
        self,
        *,
        daily_limit: int,
        monthly_limit: int,
        high_value_threshold: int,
        required_approvals: int,
        hot_wallet_percentage: int,
        cold_wallet_percentage: int,
        hot_wallet: str,
        cold_wallet: str,
        guardian_count: int,
        initialized_at: int,
    ) -> SystemConfig:
        model = SystemConfig(
            id=SINGLETON_ID,
            daily_limit=daily_limit,
            monthly_limit=monthly_limit,
            high_value_threshold=high_value_threshold,
            required_approvals=required_approvals,
            hot_wallet_percentage=hot_wallet_percentage,
            cold_wallet_percentage=cold_wallet_percentage,
            hot_wallet=hot_wallet,
            cold_wallet=cold_wallet,
            guardian_count=guardian_count,
            transaction_counter=0,
            initialized_at=initialized_at,
        )
        self._session.add(model)
        await self._session.flush()
        return model

    async def increment_counter(self) -> int:
        model = await self.get_config()
        if model is None:
            raise NotInitializedError("Contract not initialized")
        model.transaction_counter = int(model.transaction_counter) + 1
        await self._session.flush()
        return int(model.transaction_counter)

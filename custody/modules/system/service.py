"""System configuration service: initialization flag, limits and the transaction counter."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import MAX_AMOUNT, SystemConfig as SystemConfigModel
from custody.infrastructure.database.repositories.system_repository import SqlSystemRepository
from custody.modules.common.exceptions import (
    AlreadyInitializedError,
    InvalidConfigurationError,
    NotInitializedError,
)

from .models import SystemConfig, SystemLimits
from .repository import SystemRepository

GUARDIAN_COUNT = 3


def validate_limits(limits: SystemLimits) -> None:
    if limits.cold_wallet_percentage + limits.hot_wallet_percentage != 100:
        raise InvalidConfigurationError("Wallet percentages must equal 100%")
    if limits.hot_wallet_percentage < 0 or limits.cold_wallet_percentage < 0:
        raise InvalidConfigurationError("Wallet percentages must not be negative")
    if not 1 <= limits.required_approvals <= GUARDIAN_COUNT:
        raise InvalidConfigurationError(
            f"Required approvals must be between 1 and {GUARDIAN_COUNT}"
        )
    for name in ("daily_limit", "monthly_limit", "high_value_threshold"):
        value = getattr(limits, name)
        if value < 0:
            raise InvalidConfigurationError(f"{name} must not be negative")
        if value > MAX_AMOUNT:
            raise InvalidConfigurationError(f"{name} must not exceed {MAX_AMOUNT}")


@dataclass(slots=True)
class SystemService:
    repository: SystemRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "SystemService":
        return cls(SqlSystemRepository(session))

    async def is_initialized(self) -> bool:
        return await self.repository.get_config() is not None

    async def ensure_not_initialized(self) -> None:
        if await self.is_initialized():
            raise AlreadyInitializedError("Contract already initialized")

    async def require_config(self) -> SystemConfig:
        model = await self.repository.get_config()
        if model is None:
            raise NotInitializedError("Contract not initialized")
        return self._to_domain(model)

    async def get_limits(self) -> SystemLimits:
        config = await self.require_config()
        return config.limits

    async def transaction_counter(self) -> int:
        model = await self.repository.get_config()
        return int(model.transaction_counter) if model is not None else 0

    async def initialize(
        self,
        *,
        hot_wallet: str,
        cold_wallet: str,
        limits: SystemLimits,
        guardian_count: int,
        now: int,
    ) -> SystemConfig:
        await self.ensure_not_initialized()
        validate_limits(limits)
        if hot_wallet == cold_wallet:
            raise InvalidConfigurationError("Hot and cold wallets must be different addresses")

        model = await self.repository.create_config(
            daily_limit=limits.daily_limit,
            monthly_limit=limits.monthly_limit,
            high_value_threshold=limits.high_value_threshold,
            required_approvals=limits.required_approvals,
            hot_wallet_percentage=limits.hot_wallet_percentage,
            cold_wallet_percentage=limits.cold_wallet_percentage,
            hot_wallet=hot_wallet,
            cold_wallet=cold_wallet,
            guardian_count=guardian_count,
            initialized_at=now,
        )
        return self._to_domain(model)

    async def allocate_transaction_id(self) -> int:
        return await self.repository.increment_counter()

    @staticmethod
    def _to_domain(model: SystemConfigModel) -> SystemConfig:
        return SystemConfig(
            limits=SystemLimits(
                daily_limit=int(model.daily_limit),
                monthly_limit=int(model.monthly_limit),
                high_value_threshold=int(model.high_value_threshold),
                required_approvals=int(model.required_approvals),
                hot_wallet_percentage=int(model.hot_wallet_percentage),
                cold_wallet_percentage=int(model.cold_wallet_percentage),
            ),
            hot_wallet=model.hot_wallet,
            cold_wallet=model.cold_wallet,
            guardian_count=int(model.guardian_count),
            transaction_counter=int(model.transaction_counter),
            initialized_at=int(model.initialized_at),
        )

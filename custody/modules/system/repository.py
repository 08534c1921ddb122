"""Repository protocol for system configuration."""

from __future__ import annotations

from typing import Protocol

from custody.infrastructure.database.models import SystemConfig as SystemConfigModel


class SystemRepository(Protocol):
    async def get_config(self) -> SystemConfigModel | None:
        ...

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
    ) -> SystemConfigModel:
        ...

    async def increment_counter(self) -> int:
        ...

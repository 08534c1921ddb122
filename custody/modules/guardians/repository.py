"""Repository protocol for the guardian registry."""

from __future__ import annotations

from typing import Protocol, Sequence

from custody.infrastructure.database.models import (
    Guardian as GuardianModel,
    TransactionApproval as TransactionApprovalModel,
)


class GuardianRepository(Protocol):
    async def get(self, address: str) -> GuardianModel | None:
        ...

    async def list_guardians(self) -> Sequence[GuardianModel]:
        ...

    async def add(
        self,
        *,
        address: str,
        position: int,
        role: str,
        is_active: bool,
        daily_limit: int,
        monthly_limit: int,
    ) -> GuardianModel:
        ...

    async def record_approval(self, address: str, timestamp: int) -> GuardianModel:
        ...

    async def list_approvals(self, address: str, limit: int, offset: int) -> Sequence[TransactionApprovalModel]:
        ...

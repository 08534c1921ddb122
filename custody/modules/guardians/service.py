"""Guardian registry: the fixed set of approvers and their approval statistics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import (
    MAX_AMOUNT,
    Guardian as GuardianModel,
    TransactionApproval as TransactionApprovalModel,
)
from custody.infrastructure.database.repositories.guardian_repository import SqlGuardianRepository
from custody.modules.common.exceptions import (
    GuardianInactiveError,
    InvalidConfigurationError,
    NotAGuardianError,
)
from custody.modules.system import GUARDIAN_COUNT

from .models import Guardian, GuardianApproval, GuardianStats
from .repository import GuardianRepository

GuardianSet = tuple[Guardian, Guardian, Guardian]


def validate_guardian_set(guardians: Sequence[Guardian]) -> GuardianSet:
    """Return the guardians as a fixed triple, rejecting any other shape."""
    if len(guardians) != GUARDIAN_COUNT:
        raise InvalidConfigurationError(f"Must have exactly {GUARDIAN_COUNT} guardians")
    addresses = {guardian.address for guardian in guardians}
    if len(addresses) != GUARDIAN_COUNT:
        raise InvalidConfigurationError("Guardian addresses must be unique")
    for guardian in guardians:
        if not 0 <= guardian.daily_limit <= MAX_AMOUNT or not 0 <= guardian.monthly_limit <= MAX_AMOUNT:
            raise InvalidConfigurationError(f"Guardian limits out of range for {guardian.address}")
    first, second, third = guardians
    return first, second, third


@dataclass(slots=True)
class GuardianRegistry:
    repository: GuardianRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "GuardianRegistry":
        return cls(SqlGuardianRepository(session))

    async def register(self, guardians: GuardianSet) -> list[Guardian]:
        registered = []
        for position, guardian in enumerate(guardians):
            model = await self.repository.add(
                address=guardian.address,
                position=position,
                role=guardian.role,
                is_active=guardian.is_active,
                daily_limit=guardian.daily_limit,
                monthly_limit=guardian.monthly_limit,
            )
            registered.append(self._to_domain(model))
        return registered

    async def lookup(self, address: str) -> Guardian | None:
        model = await self.repository.get(address)
        return self._to_domain(model) if model else None

    async def require_active(self, address: str) -> Guardian:
        guardian = await self.lookup(address)
        if guardian is None:
            raise NotAGuardianError(f"Not a guardian: {address}")
        if not guardian.is_active:
            raise GuardianInactiveError(f"Guardian not active: {address}")
        return guardian

    async def record_approval(self, address: str, timestamp: int) -> Guardian:
        model = await self.repository.record_approval(address, timestamp)
        return self._to_domain(model)

    async def list_guardians(self) -> list[Guardian]:
        models = await self.repository.list_guardians()
        return [self._to_domain(model) for model in models]

    async def list_approvals(self, address: str, limit: int = 20, offset: int = 0) -> list[GuardianApproval]:
        models = await self.repository.list_approvals(address, limit, offset)
        return [self._to_approval(model) for model in models]

    async def stats(self) -> GuardianStats:
        guardians = await self.list_guardians()
        total = len(guardians)
        total_approvals = sum(guardian.approval_count for guardian in guardians)
        return GuardianStats(
            total=total,
            active=sum(1 for guardian in guardians if guardian.is_active),
            total_approvals=total_approvals,
            average_approvals=round(total_approvals / total, 2) if total else 0.0,
        )

    @staticmethod
    def _to_domain(model: GuardianModel) -> Guardian:
        return Guardian(
            address=model.address,
            role=model.role,
            is_active=bool(model.is_active),
            daily_limit=int(model.daily_limit),
            monthly_limit=int(model.monthly_limit),
            approval_count=int(model.approval_count),
            last_approval=int(model.last_approval),
        )

    @staticmethod
    def _to_approval(model: TransactionApprovalModel) -> GuardianApproval:
        return GuardianApproval(
            transaction_id=int(model.transaction_id),
            guardian=model.guardian,
            position=int(model.position),
            approved_at=int(model.approved_at),
        )

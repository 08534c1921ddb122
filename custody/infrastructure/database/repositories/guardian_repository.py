"""SQLAlchemy implementation for the guardian registry."""

from __future__ import annotations

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import Guardian, TransactionApproval
from custody.modules.common.exceptions import NotAGuardianError


class SqlGuardianRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, address: str) -> Guardian | None:
        return await self._session.get(Guardian, address)

    async def list_guardians(self) -> list[Guardian]:
        stmt = select(Guardian).order_by(Guardian.position)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def add(
        self,
        *,
        address: str,
        position: int,
        role: str,
        is_active: bool,
        daily_limit: int,
        monthly_limit: int,
    ) -> Guardian:
        model = Guardian(
            address=address,
            position=position,
            role=role,
            is_active=is_active,
            daily_limit=daily_limit,
            monthly_limit=monthly_limit,
            approval_count=0,
            last_approval=0,
        )
        self._session.add(model)
        await self._session.flush()
        return model

    async def record_approval(self, address: str, timestamp: int) -> Guardian:
        model = await self.get(address)
        if model is None:
            raise NotAGuardianError(f"Not a guardian: {address}")
        model.approval_count = int(model.approval_count) + 1
        model.last_approval = timestamp
        await self._session.flush()
        return model

    async def list_approvals(self, address: str, limit: int, offset: int) -> list[TransactionApproval]:
        stmt = (
            select(TransactionApproval)
            .where(TransactionApproval.guardian == address)
            .order_by(desc(TransactionApproval.approved_at), desc(TransactionApproval.id))
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

"""SQLAlchemy implementation for custody transactions."""

from __future__ import annotations

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import Transaction, TransactionApproval

AWAITING_APPROVAL = "awaiting_approval"


class SqlTransactionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, tx_id: int) -> Transaction | None:
        return await self._session.get(Transaction, tx_id)

    async def add(
        self,
        *,
        tx_id: int,
        from_wallet: str,
        to_address: str,
        amount: int,
        memo: str,
        tx_type: str,
        status: str,
        created_at: int,
        requires_approval: bool,
    ) -> Transaction:
        model = Transaction(
            id=tx_id,
            from_wallet=from_wallet,
            to_address=to_address,
            amount=amount,
            memo=memo,
            tx_type=tx_type,
            status=status,
            created_at=created_at,
            executed_at=None,
            requires_approval=requires_approval,
            approvals=[],
        )
        self._session.add(model)
        await self._session.flush()
        return model

    async def add_approval(self, model: Transaction, guardian: str, approved_at: int) -> Transaction:
        model.approvals.append(
            TransactionApproval(
                guardian=guardian,
                position=len(model.approvals),
                approved_at=approved_at,
            )
        )
        await self._session.flush()
        return model

    async def set_status(
        self,
        model: Transaction,
        status: str,
        *,
        executed_at: int | None = None,
    ) -> Transaction:
        model.status = status
        if executed_at is not None:
            model.executed_at = executed_at
        await self._session.flush()
        return model

    async def list_transactions(self, status: str | None, limit: int, offset: int) -> list[Transaction]:
        stmt = select(Transaction)
        if status:
            stmt = stmt.where(Transaction.status == status)
        stmt = stmt.order_by(desc(Transaction.id)).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def list_awaiting_without(self, guardian: str) -> list[Transaction]:
        stmt = (
            select(Transaction)
            .where(Transaction.status == AWAITING_APPROVAL)
            .where(~Transaction.approvals.any(TransactionApproval.guardian == guardian))
            .order_by(desc(Transaction.id))
        )
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def count_by_status(self) -> dict[str, int]:
        stmt = select(Transaction.status, func.count(Transaction.id)).group_by(Transaction.status)
        result = await self._session.execute(stmt)
        return {status: int(count) for status, count in result.all()}

    async def sum_amount(self, status: str) -> int:
        stmt = select(func.coalesce(func.sum(Transaction.amount), 0)).where(Transaction.status == status)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

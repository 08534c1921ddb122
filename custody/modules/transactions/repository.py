"""Repository protocol for custody transactions."""

from __future__ import annotations

from typing import Protocol, Sequence

from custody.infrastructure.database.models import Transaction as TransactionModel


class TransactionRepository(Protocol):
    async def get(self, tx_id: int) -> TransactionModel | None:
        ...

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
    ) -> TransactionModel:
        ...

    async def add_approval(self, model: TransactionModel, guardian: str, approved_at: int) -> TransactionModel:
        ...

    async def set_status(
        self,
        model: TransactionModel,
        status: str,
        *,
        executed_at: int | None = None,
    ) -> TransactionModel:
        ...

    async def list_transactions(self, status: str | None, limit: int, offset: int) -> Sequence[TransactionModel]:
        ...

    async def list_awaiting_without(self, guardian: str) -> Sequence[TransactionModel]:
        ...

    async def count_by_status(self) -> dict[str, int]:
        ...

    async def sum_amount(self, status: str) -> int:
        ...

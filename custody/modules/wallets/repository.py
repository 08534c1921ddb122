"""Repository protocol for wallet operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from custody.infrastructure.database.models import Wallet as WalletModel


class WalletRepository(Protocol):
    async def get_wallet(self, address: str) -> WalletModel | None:
        ...

    async def list_wallets(self) -> Sequence[WalletModel]:
        ...

    async def create_wallet(self, address: str, kind: str) -> WalletModel:
        ...

    async def update_balance(self, address: str, *, balance_delta: int, reserved_delta: int) -> WalletModel:
        ...

"""SQLAlchemy implementation for the wallet ledger."""

from __future__ import annotations

from sqlalchemy import case, select
from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import Wallet
from custody.modules.common.exceptions import WalletNotFoundError


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_wallet(self, address: str) -> Wallet | None:
        return await self.session.get(Wallet, address)

    async def list_wallets(self) -> list[Wallet]:
        # Hot wallet first, then cold.
        stmt = select(Wallet).order_by(case((Wallet.kind == "hot", 0), else_=1), Wallet.address)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_wallet(self, address: str, kind: str) -> Wallet:
        wallet = Wallet(address=address, kind=kind, balance=0, reserved_balance=0, is_active=True)
        self.session.add(wallet)
        await self.session.flush()
        return wallet

    async def update_balance(self, address: str, *, balance_delta: int, reserved_delta: int) -> Wallet:
        wallet = await self.get_wallet(address)
        if wallet is None:
            raise WalletNotFoundError(f"Wallet not found: {address}")
        wallet.balance = int(wallet.balance) + balance_delta
        wallet.reserved_balance = int(wallet.reserved_balance) + reserved_delta
        await self.session.flush()
        return wallet

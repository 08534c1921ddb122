"""Wallet ledger: balances, reservations against pending transfers, settlement."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import MAX_AMOUNT, Wallet as WalletModel
from custody.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from custody.modules.common.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    WalletNotFoundError,
)

from .models import Wallet, WalletKind
from .repository import WalletRepository


def ensure_positive(amount: int) -> None:
    if amount <= 0:
        raise InvalidAmountError("Amount must be positive")
    if amount > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount must not exceed {MAX_AMOUNT}")


@dataclass(slots=True)
class WalletLedger:
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletLedger":
        return cls(SqlWalletRepository(session))

    async def open_wallets(self, *, hot_wallet: str, cold_wallet: str) -> tuple[Wallet, Wallet]:
        hot = await self.repository.create_wallet(hot_wallet, WalletKind.HOT.value)
        cold = await self.repository.create_wallet(cold_wallet, WalletKind.COLD.value)
        return self._to_domain(hot), self._to_domain(cold)

    async def get_wallet(self, address: str) -> Wallet | None:
        model = await self.repository.get_wallet(address)
        return self._to_domain(model) if model else None

    async def require_wallet(self, address: str) -> Wallet:
        wallet = await self.get_wallet(address)
        if wallet is None:
            raise WalletNotFoundError(f"Wallet not found: {address}")
        return wallet

    async def get_balance(self, address: str) -> int | None:
        wallet = await self.get_wallet(address)
        return wallet.balance if wallet else None

    async def list_wallets(self) -> list[Wallet]:
        models = await self.repository.list_wallets()
        return [self._to_domain(model) for model in models]

    async def reserve(self, address: str, amount: int) -> Wallet:
        """Earmark ``amount`` for a pending transfer without moving funds yet."""
        ensure_positive(amount)
        wallet = await self.require_wallet(address)
        if wallet.balance < amount:
            raise InsufficientFundsError("Insufficient balance")
        # Earlier reservations already claim part of the balance.
        if wallet.available < amount:
            raise InsufficientFundsError(
                f"Insufficient unreserved balance: {wallet.available} available, {amount} requested"
            )
        model = await self.repository.update_balance(address, balance_delta=0, reserved_delta=amount)
        return self._to_domain(model)

    async def settle(self, address: str, amount: int) -> Wallet:
        """Move a reserved amount out of the wallet."""
        ensure_positive(amount)
        wallet = await self.require_wallet(address)
        if wallet.reserved_balance < amount:
            raise InsufficientFundsError(
                f"Reserved balance {wallet.reserved_balance} does not cover settlement of {amount}"
            )
        model = await self.repository.update_balance(address, balance_delta=-amount, reserved_delta=-amount)
        return self._to_domain(model)

    async def deposit(self, address: str, amount: int) -> Wallet:
        ensure_positive(amount)
        wallet = await self.require_wallet(address)
        if wallet.balance + amount > MAX_AMOUNT:
            raise InvalidAmountError(f"Deposit would push the balance of {address} past {MAX_AMOUNT}")
        model = await self.repository.update_balance(address, balance_delta=amount, reserved_delta=0)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: WalletModel) -> Wallet:
        return Wallet(
            address=model.address,
            kind=WalletKind(model.kind),
            balance=int(model.balance),
            reserved_balance=int(model.reserved_balance),
            is_active=bool(model.is_active),
        )

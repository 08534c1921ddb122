"""Wallet ledger: deposits, reservations and settlement."""

import pytest

from custody.infrastructure.database.models import MAX_AMOUNT
from custody.modules.common.exceptions import (
    InsufficientFundsError,
    InvalidAmountError,
    NotAGuardianError,
    UnauthorizedError,
    WalletNotFoundError,
)
from custody.modules.wallets import WalletKind, WalletLedger
from tests.conftest import (
    COLD,
    COLD_FUNDING,
    G1,
    G2,
    HOT,
    HOT_FUNDING,
    STRANGER,
    as_caller,
)


class TestDeposit:
    @pytest.mark.asyncio
    async def test_deposit_credits_balance(self, custody):
        wallet = await custody.deposit(wallet=HOT, amount=2_500, guardian=G2, caller=as_caller(G2))

        assert wallet.balance == HOT_FUNDING + 2_500
        assert wallet.reserved_balance == 0
        assert await custody.get_hot_balance() == HOT_FUNDING + 2_500
        assert await custody.get_cold_balance() == COLD_FUNDING

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [0, -1])
    async def test_non_positive_deposit_is_rejected(self, custody, amount):
        with pytest.raises(InvalidAmountError):
            await custody.deposit(wallet=HOT, amount=amount, guardian=G1, caller=as_caller(G1))

        assert await custody.get_wallet_balance(HOT) == HOT_FUNDING

    @pytest.mark.asyncio
    async def test_deposit_beyond_64_bits_is_rejected(self, custody):
        with pytest.raises(InvalidAmountError):
            await custody.deposit(wallet=HOT, amount=2**63, guardian=G1, caller=as_caller(G1))

        assert await custody.get_wallet_balance(HOT) == HOT_FUNDING

    @pytest.mark.asyncio
    async def test_deposit_overflowing_balance_is_rejected(self, custody):
        with pytest.raises(InvalidAmountError):
            await custody.deposit(wallet=HOT, amount=2**63 - 10, guardian=G1, caller=as_caller(G1))

        assert await custody.get_wallet_balance(HOT) == HOT_FUNDING

    @pytest.mark.asyncio
    async def test_deposit_up_to_the_maximum_balance(self, custody):
        wallet = await custody.deposit(wallet=HOT, amount=MAX_AMOUNT - HOT_FUNDING, guardian=G1, caller=as_caller(G1))

        assert wallet.balance == MAX_AMOUNT

    @pytest.mark.asyncio
    async def test_unknown_wallet(self, custody):
        with pytest.raises(WalletNotFoundError):
            await custody.deposit(wallet="nowhere", amount=10, guardian=G1, caller=as_caller(G1))

    @pytest.mark.asyncio
    async def test_depositor_must_be_an_authenticated_guardian(self, custody):
        with pytest.raises(UnauthorizedError):
            await custody.deposit(wallet=HOT, amount=10, guardian=G1, caller=as_caller(G2))
        with pytest.raises(NotAGuardianError):
            await custody.deposit(wallet=HOT, amount=10, guardian=STRANGER, caller=as_caller(STRANGER))

        assert await custody.get_wallet_balance(HOT) == HOT_FUNDING


class TestWalletQueries:
    @pytest.mark.asyncio
    async def test_list_wallets_hot_first(self, custody):
        wallets = await custody.list_wallets()

        assert [(wallet.address, wallet.kind) for wallet in wallets] == [
            (HOT, WalletKind.HOT),
            (COLD, WalletKind.COLD),
        ]

    @pytest.mark.asyncio
    async def test_unknown_wallet_lookups_return_none(self, custody):
        assert await custody.get_wallet("nowhere") is None
        assert await custody.get_wallet_balance("nowhere") is None


class TestWalletLedger:
    @pytest.mark.asyncio
    async def test_reserve_and_settle(self, session_factory):
        async with session_factory() as session:
            async with session.begin():
                ledger = WalletLedger.with_session(session)
                await ledger.open_wallets(hot_wallet=HOT, cold_wallet=COLD)
                await ledger.deposit(HOT, 100)

                reserved = await ledger.reserve(HOT, 60)
                assert (reserved.balance, reserved.reserved_balance, reserved.available) == (100, 60, 40)

                with pytest.raises(InsufficientFundsError):
                    await ledger.reserve(HOT, 50)
                with pytest.raises(InsufficientFundsError):
                    await ledger.settle(HOT, 70)

                settled = await ledger.settle(HOT, 60)
                assert (settled.balance, settled.reserved_balance) == (40, 0)

    @pytest.mark.asyncio
    async def test_reserve_requires_balance(self, session_factory):
        async with session_factory() as session:
            async with session.begin():
                ledger = WalletLedger.with_session(session)
                await ledger.open_wallets(hot_wallet=HOT, cold_wallet=COLD)

                with pytest.raises(InsufficientFundsError):
                    await ledger.reserve(COLD, 1)
                with pytest.raises(WalletNotFoundError):
                    await ledger.reserve("nowhere", 1)
                with pytest.raises(InvalidAmountError):
                    await ledger.settle(COLD, 0)

"""Custody engine facade.

Every public operation opens its own session and runs inside a single
database transaction: it commits when the operation returns and rolls back
when any ``CustodyError`` (or anything else) escapes, so a rejected call never
leaves partial state behind.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Sequence

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from custody.core.clock import Clock, SystemClock
from custody.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository
from custody.modules import audit
from custody.modules.audit import AuditEvent, AuditTrail
from custody.modules.common.auth import Authenticator
from custody.modules.common.exceptions import CustodyError
from custody.modules.emergency import EmergencyController, EmergencyState
from custody.modules.guardians import (
    Guardian,
    GuardianApproval,
    GuardianRegistry,
    GuardianStats,
    validate_guardian_set,
)
from custody.modules.limits import SpendingLimitEnforcer, SpendingSummary
from custody.modules.system import SystemConfig, SystemLimits, SystemService
from custody.modules.transactions import (
    Transaction,
    TransactionStateMachine,
    TransactionStats,
    TransactionStatus,
    TransactionType,
)
from custody.modules.wallets import Wallet, WalletLedger

from .models import ApprovalOutcome

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CustodyContext:
    """The component services bound to one session."""

    system: SystemService
    guardians: GuardianRegistry
    wallets: WalletLedger
    limits: SpendingLimitEnforcer
    emergency: EmergencyController
    audit: AuditTrail
    transactions: TransactionStateMachine

    @classmethod
    def with_session(cls, session: AsyncSession) -> "CustodyContext":
        system = SystemService.with_session(session)
        guardians = GuardianRegistry.with_session(session)
        wallets = WalletLedger.with_session(session)
        limits = SpendingLimitEnforcer.with_session(session)
        emergency = EmergencyController.with_session(session)
        return cls(
            system=system,
            guardians=guardians,
            wallets=wallets,
            limits=limits,
            emergency=emergency,
            audit=AuditTrail.with_session(session),
            transactions=TransactionStateMachine(
                repository=SqlTransactionRepository(session),
                system=system,
                wallets=wallets,
                limits=limits,
                guardians=guardians,
                emergency=emergency,
            ),
        )


@dataclass(slots=True)
class CustodyEngine:
    session_factory: async_sessionmaker[AsyncSession]
    clock: Clock = field(default_factory=SystemClock)

    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncIterator[CustodyContext]:
        async with self.session_factory() as session:
            try:
                async with session.begin():
                    yield CustodyContext.with_session(session)
            except CustodyError as exc:
                logger.warning("%s rejected: %s", operation, exc)
                raise

    @asynccontextmanager
    async def _read(self) -> AsyncIterator[CustodyContext]:
        async with self.session_factory() as session:
            yield CustodyContext.with_session(session)

    # ------------------------------------------------------------------
    # Mutating operations
    # ------------------------------------------------------------------

    async def initialize(
        self,
        *,
        guardians: Sequence[Guardian],
        hot_wallet: str,
        cold_wallet: str,
        limits: SystemLimits,
    ) -> SystemConfig:
        now = self.clock.now()
        async with self._unit_of_work("initialize") as ctx:
            await ctx.system.ensure_not_initialized()
            guardian_set = validate_guardian_set(guardians)
            config = await ctx.system.initialize(
                hot_wallet=hot_wallet,
                cold_wallet=cold_wallet,
                limits=limits,
                guardian_count=len(guardian_set),
                now=now,
            )
            await ctx.guardians.register(guardian_set)
            await ctx.wallets.open_wallets(hot_wallet=hot_wallet, cold_wallet=cold_wallet)
            await ctx.emergency.arm()
            await ctx.audit.record(
                audit.SYSTEM_INITIALIZED,
                resource="system",
                timestamp=now,
                data={
                    "guardians": [guardian.address for guardian in guardian_set],
                    "hot_wallet": hot_wallet,
                    "cold_wallet": cold_wallet,
                    "required_approvals": limits.required_approvals,
                },
            )
        logger.info("Custody contract initialized with %d guardians", config.guardian_count)
        return config

    async def create_transaction(
        self,
        *,
        from_wallet: str,
        to_address: str,
        amount: int,
        memo: str = "",
        tx_type: TransactionType = TransactionType.PAYMENT,
    ) -> Transaction:
        now = self.clock.now()
        async with self._unit_of_work("create_transaction") as ctx:
            transaction = await ctx.transactions.create(
                from_wallet=from_wallet,
                to_address=to_address,
                amount=amount,
                memo=memo,
                tx_type=tx_type,
                now=now,
            )
            await ctx.audit.record(
                audit.TRANSACTION_CREATED,
                resource=f"transaction:{transaction.id}",
                timestamp=now,
                data={
                    "from_wallet": from_wallet,
                    "to_address": to_address,
                    "amount": amount,
                    "tx_type": tx_type.value,
                    "requires_approval": transaction.requires_approval,
                },
            )
            await self._audit_execution(ctx, transaction, now)
        logger.info(
            "Transaction %s created, requires_approval: %s",
            transaction.id,
            transaction.requires_approval,
        )
        return transaction

    async def approve_transaction(
        self,
        *,
        guardian: str,
        tx_id: int,
        caller: Authenticator,
    ) -> ApprovalOutcome:
        now = self.clock.now()
        async with self._unit_of_work("approve_transaction") as ctx:
            transaction, quorum_reached = await ctx.transactions.approve(
                guardian=guardian,
                tx_id=tx_id,
                now=now,
                caller=caller,
            )
            await ctx.audit.record(
                audit.TRANSACTION_APPROVED,
                actor=guardian,
                resource=f"transaction:{tx_id}",
                timestamp=now,
                data={"approvals": len(transaction.approvals), "quorum_reached": quorum_reached},
            )
            await self._audit_execution(ctx, transaction, now)
        logger.info(
            "Transaction %s approved by guardian, total approvals: %d",
            tx_id,
            len(transaction.approvals),
        )
        return ApprovalOutcome(transaction=transaction, quorum_reached=quorum_reached)

    async def emergency_shutdown(self, *, guardian: str, caller: Authenticator) -> EmergencyState:
        now = self.clock.now()
        async with self._unit_of_work("emergency_shutdown") as ctx:
            caller.require_auth(guardian)
            await ctx.system.require_config()
            await ctx.guardians.require_active(guardian)
            state, activated = await ctx.emergency.trip(guardian, now)
            if activated:
                await ctx.audit.record(
                    audit.EMERGENCY_ACTIVATED,
                    actor=guardian,
                    resource="system",
                    timestamp=now,
                )
        if activated:
            logger.warning("Emergency shutdown activated by guardian %s", guardian)
        return state

    async def deposit(
        self,
        *,
        wallet: str,
        amount: int,
        guardian: str,
        caller: Authenticator,
    ) -> Wallet:
        now = self.clock.now()
        async with self._unit_of_work("deposit") as ctx:
            caller.require_auth(guardian)
            await ctx.system.require_config()
            await ctx.emergency.ensure_not_tripped()
            await ctx.guardians.require_active(guardian)
            updated = await ctx.wallets.deposit(wallet, amount)
            await ctx.audit.record(
                audit.WALLET_DEPOSITED,
                actor=guardian,
                resource=f"wallet:{wallet}",
                timestamp=now,
                data={"amount": amount, "balance": updated.balance},
            )
        return updated

    @staticmethod
    async def _audit_execution(ctx: CustodyContext, transaction: Transaction, now: int) -> None:
        if transaction.status is TransactionStatus.EXECUTED:
            await ctx.audit.record(
                audit.TRANSACTION_EXECUTED,
                resource=f"transaction:{transaction.id}",
                timestamp=now,
                data={"amount": transaction.amount, "from_wallet": transaction.from_wallet},
            )

    # ------------------------------------------------------------------
    # Read-only queries (never gated by emergency mode)
    # ------------------------------------------------------------------

    async def get_transaction(self, tx_id: int) -> Transaction | None:
        async with self._read() as ctx:
            return await ctx.transactions.get(tx_id)

    async def list_transactions(
        self,
        status: TransactionStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Transaction]:
        async with self._read() as ctx:
            return await ctx.transactions.list_transactions(status, limit, offset)

    async def pending_approvals(self, guardian: str) -> list[Transaction]:
        async with self._read() as ctx:
            return await ctx.transactions.pending_for(guardian)

    async def transaction_stats(self) -> TransactionStats:
        async with self._read() as ctx:
            return await ctx.transactions.stats()

    async def get_transaction_counter(self) -> int:
        async with self._read() as ctx:
            return await ctx.system.transaction_counter()

    async def get_guardian(self, address: str) -> Guardian | None:
        async with self._read() as ctx:
            return await ctx.guardians.lookup(address)

    async def list_guardians(self) -> list[Guardian]:
        async with self._read() as ctx:
            return await ctx.guardians.list_guardians()

    async def guardian_stats(self) -> GuardianStats:
        async with self._read() as ctx:
            return await ctx.guardians.stats()

    async def guardian_approvals(self, address: str, limit: int = 20, offset: int = 0) -> list[GuardianApproval]:
        async with self._read() as ctx:
            return await ctx.guardians.list_approvals(address, limit, offset)

    async def get_wallet(self, address: str) -> Wallet | None:
        async with self._read() as ctx:
            return await ctx.wallets.get_wallet(address)

    async def get_wallet_balance(self, address: str) -> int | None:
        async with self._read() as ctx:
            return await ctx.wallets.get_balance(address)

    async def list_wallets(self) -> list[Wallet]:
        async with self._read() as ctx:
            return await ctx.wallets.list_wallets()

    async def get_hot_balance(self) -> int:
        async with self._read() as ctx:
            config = await ctx.system.require_config()
            balance = await ctx.wallets.get_balance(config.hot_wallet)
            return balance if balance is not None else 0

    async def get_cold_balance(self) -> int:
        async with self._read() as ctx:
            config = await ctx.system.require_config()
            balance = await ctx.wallets.get_balance(config.cold_wallet)
            return balance if balance is not None else 0

    async def get_system_config(self) -> SystemConfig:
        async with self._read() as ctx:
            return await ctx.system.require_config()

    async def get_system_limits(self) -> SystemLimits:
        async with self._read() as ctx:
            return await ctx.system.get_limits()

    async def is_initialized(self) -> bool:
        async with self._read() as ctx:
            return await ctx.system.is_initialized()

    async def is_emergency_mode(self) -> bool:
        async with self._read() as ctx:
            return await ctx.emergency.is_tripped()

    async def emergency_state(self) -> EmergencyState:
        async with self._read() as ctx:
            return await ctx.emergency.state()

    async def spending_summary(self) -> SpendingSummary:
        now = self.clock.now()
        async with self._read() as ctx:
            limits = await ctx.system.get_limits()
            return await ctx.limits.summary(now, limits)

    async def list_audit_events(
        self,
        limit: int = 50,
        offset: int = 0,
        action: str | None = None,
    ) -> list[AuditEvent]:
        async with self._read() as ctx:
            return await ctx.audit.list_events(limit, offset, action)

"""Transaction state machine.

A transfer is created either ``pending`` (executed straight away) or
``awaiting_approval``. Guardian approvals accumulate on the transaction and
the call that reaches the configured quorum moves it to ``approved`` and
executes it. Execution settles the reserved funds and records the spend, and
only runs for a transaction in ``pending`` or ``approved``, which each
transaction passes through exactly once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from custody.infrastructure.database.models import Transaction as TransactionModel
from custody.modules.common.auth import Authenticator
from custody.modules.common.exceptions import (
    DuplicateApprovalError,
    InsufficientFundsError,
    InvalidTransactionStateError,
    TransactionNotFoundError,
)
from custody.modules.emergency import EmergencyController
from custody.modules.guardians import GuardianRegistry
from custody.modules.limits import SpendingLimitEnforcer
from custody.modules.system import SystemService
from custody.modules.wallets import WalletKind, WalletLedger, ensure_positive

from .models import (
    EXECUTABLE_STATUSES,
    Transaction,
    TransactionStats,
    TransactionStatus,
    TransactionType,
)
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionStateMachine:
    repository: TransactionRepository
    system: SystemService
    wallets: WalletLedger
    limits: SpendingLimitEnforcer
    guardians: GuardianRegistry
    emergency: EmergencyController

    async def create(
        self,
        *,
        from_wallet: str,
        to_address: str,
        amount: int,
        memo: str,
        tx_type: TransactionType,
        now: int,
    ) -> Transaction:
        config = await self.system.require_config()
        await self.emergency.ensure_not_tripped()
        ensure_positive(amount)

        wallet = await self.wallets.require_wallet(from_wallet)
        if wallet.balance < amount:
            raise InsufficientFundsError("Insufficient balance")

        limits = config.limits
        requires_approval = amount > limits.high_value_threshold or wallet.kind is WalletKind.COLD
        # Below-threshold hot wallet transfers are not checked against the caps.
        if requires_approval:
            await self.limits.check(amount, now, limits)

        tx_id = await self.system.allocate_transaction_id()
        await self.wallets.reserve(from_wallet, amount)
        status = TransactionStatus.AWAITING_APPROVAL if requires_approval else TransactionStatus.PENDING
        model = await self.repository.add(
            tx_id=tx_id,
            from_wallet=from_wallet,
            to_address=to_address,
            amount=amount,
            memo=memo,
            tx_type=tx_type.value,
            status=status.value,
            created_at=now,
            requires_approval=requires_approval,
        )
        logger.debug("Transaction %s stored with status %s", tx_id, status.value)

        if not requires_approval:
            model = await self._execute(model, now)
        return self._to_domain(model)

    async def approve(
        self,
        *,
        guardian: str,
        tx_id: int,
        now: int,
        caller: Authenticator,
    ) -> tuple[Transaction, bool]:
        """Record ``guardian``'s approval; the flag reports whether quorum was reached."""
        caller.require_auth(guardian)
        config = await self.system.require_config()
        await self.emergency.ensure_not_tripped()
        await self.guardians.require_active(guardian)

        model = await self.repository.get(tx_id)
        if model is None:
            raise TransactionNotFoundError(f"Transaction not found: {tx_id}")
        if any(approval.guardian == guardian for approval in model.approvals):
            raise DuplicateApprovalError(f"Already approved by {guardian}")
        if model.status != TransactionStatus.AWAITING_APPROVAL.value:
            raise InvalidTransactionStateError(
                f"Transaction {tx_id} is {model.status}, not awaiting approval"
            )

        model = await self.repository.add_approval(model, guardian, now)
        await self.guardians.record_approval(guardian, now)

        quorum_reached = len(model.approvals) >= config.limits.required_approvals
        if quorum_reached:
            model = await self.repository.set_status(model, TransactionStatus.APPROVED.value)
            model = await self._execute(model, now)
        return self._to_domain(model), quorum_reached

    async def _execute(self, model: TransactionModel, now: int) -> TransactionModel:
        if TransactionStatus(model.status) not in EXECUTABLE_STATUSES:
            raise InvalidTransactionStateError(f"Transaction {model.id} cannot execute from {model.status}")
        amount = int(model.amount)
        await self.wallets.settle(model.from_wallet, amount)
        await self.limits.record(amount, now)
        model = await self.repository.set_status(model, TransactionStatus.EXECUTED.value, executed_at=now)
        logger.info("Transaction %s executed successfully", model.id)
        return model

    async def get(self, tx_id: int) -> Transaction | None:
        model = await self.repository.get(tx_id)
        return self._to_domain(model) if model else None

    async def list_transactions(
        self,
        status: TransactionStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Transaction]:
        models = await self.repository.list_transactions(status.value if status else None, limit, offset)
        return [self._to_domain(model) for model in models]

    async def pending_for(self, guardian: str) -> list[Transaction]:
        models = await self.repository.list_awaiting_without(guardian)
        return [self._to_domain(model) for model in models]

    async def stats(self) -> TransactionStats:
        by_status = await self.repository.count_by_status()
        return TransactionStats(
            total=sum(by_status.values()),
            by_status=by_status,
            executed_volume=await self.repository.sum_amount(TransactionStatus.EXECUTED.value),
        )

    @staticmethod
    def _to_domain(model: TransactionModel) -> Transaction:
        return Transaction(
            id=int(model.id),
            from_wallet=model.from_wallet,
            to_address=model.to_address,
            amount=int(model.amount),
            memo=model.memo or "",
            tx_type=TransactionType(model.tx_type),
            status=TransactionStatus(model.status),
            approvals=[approval.guardian for approval in model.approvals],
            created_at=int(model.created_at),
            executed_at=int(model.executed_at) if model.executed_at is not None else None,
            requires_approval=bool(model.requires_approval),
        )

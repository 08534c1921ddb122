"""Domain representations for custody transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TransactionType(str, Enum):
    PAYMENT = "payment"
    REBALANCE = "rebalance"
    WITHDRAWAL = "withdrawal"
    EMERGENCY = "emergency"


class TransactionStatus(str, Enum):
    PENDING = "pending"
    AWAITING_APPROVAL = "awaiting_approval"
    APPROVED = "approved"
    EXECUTED = "executed"
    # No transition produces these two yet; reserved funds are never released.
    FAILED = "failed"
    CANCELLED = "cancelled"


# Statuses from which execution may proceed.
EXECUTABLE_STATUSES = frozenset({TransactionStatus.PENDING, TransactionStatus.APPROVED})


@dataclass(slots=True)
class Transaction:
    id: int
    from_wallet: str
    to_address: str
    amount: int
    memo: str
    tx_type: TransactionType
    status: TransactionStatus
    approvals: list[str]
    created_at: int
    executed_at: Optional[int]
    requires_approval: bool


@dataclass(slots=True)
class TransactionStats:
    total: int
    by_status: dict[str, int] = field(default_factory=dict)
    executed_volume: int = 0

    @property
    def awaiting_approval(self) -> int:
        return self.by_status.get(TransactionStatus.AWAITING_APPROVAL.value, 0)

    @property
    def executed(self) -> int:
        return self.by_status.get(TransactionStatus.EXECUTED.value, 0)

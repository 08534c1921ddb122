"""Transaction state machine exports."""

from .models import Transaction, TransactionStats, TransactionStatus, TransactionType
from .service import TransactionStateMachine

__all__ = [
    "Transaction",
    "TransactionStateMachine",
    "TransactionStats",
    "TransactionStatus",
    "TransactionType",
]

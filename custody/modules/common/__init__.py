"""Shared abstractions used across custody modules."""

from .auth import Authenticator, CallerIdentity
from .exceptions import (
    AlreadyInitializedError,
    CustodyError,
    DuplicateApprovalError,
    EmergencyActiveError,
    GuardianInactiveError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidConfigurationError,
    InvalidTransactionStateError,
    LimitExceededError,
    NotAGuardianError,
    NotInitializedError,
    TransactionNotFoundError,
    UnauthorizedError,
    WalletNotFoundError,
)

__all__ = [
    "Authenticator",
    "CallerIdentity",
    "CustodyError",
    "AlreadyInitializedError",
    "InvalidConfigurationError",
    "NotInitializedError",
    "EmergencyActiveError",
    "InvalidAmountError",
    "WalletNotFoundError",
    "InsufficientFundsError",
    "LimitExceededError",
    "NotAGuardianError",
    "GuardianInactiveError",
    "TransactionNotFoundError",
    "DuplicateApprovalError",
    "InvalidTransactionStateError",
    "UnauthorizedError",
]

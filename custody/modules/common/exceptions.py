"""Custody domain exceptions.

Every failure of a custody operation is raised as a subclass of
``CustodyError``. The engine runs each operation inside a single database
transaction, so raising any of these discards all state written so far.
"""


class CustodyError(Exception):
    """Base class for custody domain errors."""

    code = "custody_error"


class AlreadyInitializedError(CustodyError):
    """Raised when ``initialize`` is called a second time."""

    code = "already_initialized"


class InvalidConfigurationError(CustodyError):
    """Raised for a malformed guardian set, wallet pair or limit set."""

    code = "invalid_configuration"


class NotInitializedError(CustodyError):
    """Raised when an operation needs configuration that does not exist yet."""

    code = "not_initialized"


class EmergencyActiveError(CustodyError):
    """Raised when a mutating operation runs while emergency mode is on."""

    code = "emergency_active"


class InvalidAmountError(CustodyError):
    """Raised for zero or negative transfer amounts."""

    code = "invalid_amount"


class WalletNotFoundError(CustodyError):
    """Raised when the requested wallet does not exist."""

    code = "wallet_not_found"


class InsufficientFundsError(CustodyError):
    """Raised when a wallet balance cannot cover the requested amount."""

    code = "insufficient_funds"


class LimitExceededError(CustodyError):
    """Raised when a transfer would breach the daily or monthly cap."""

    code = "limit_exceeded"

    def __init__(self, period: str, spent: int, amount: int, limit: int) -> None:
        super().__init__(f"Exceeds {period} limit: {spent} + {amount} > {limit}")
        self.period = period
        self.spent = spent
        self.amount = amount
        self.limit = limit


class NotAGuardianError(CustodyError):
    """Raised when an address is not one of the registered guardians."""

    code = "not_a_guardian"


class GuardianInactiveError(CustodyError):
    """Raised when a registered guardian is deactivated."""

    code = "guardian_inactive"


class TransactionNotFoundError(CustodyError):
    """Raised when the requested transaction id does not exist."""

    code = "transaction_not_found"


class DuplicateApprovalError(CustodyError):
    """Raised when a guardian approves the same transaction twice."""

    code = "duplicate_approval"


class InvalidTransactionStateError(CustodyError):
    """Raised when a transaction is not in a state that allows the operation."""

    code = "invalid_transaction_state"


class UnauthorizedError(CustodyError):
    """Raised when the caller has not proven control of an address."""

    code = "unauthorized"


__all__ = [
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

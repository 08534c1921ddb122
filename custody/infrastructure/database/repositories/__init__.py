"""SQLAlchemy-backed repository implementations."""

from .audit_repository import SqlAuditRepository
from .emergency_repository import SqlEmergencyRepository
from .guardian_repository import SqlGuardianRepository
from .spending_repository import SqlSpendingRepository
from .system_repository import SqlSystemRepository
from .transaction_repository import SqlTransactionRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlAuditRepository",
    "SqlEmergencyRepository",
    "SqlGuardianRepository",
    "SqlSpendingRepository",
    "SqlSystemRepository",
    "SqlTransactionRepository",
    "SqlWalletRepository",
]

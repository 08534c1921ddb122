"""Audit trail exports."""

from .models import AuditEvent
from .service import (
    EMERGENCY_ACTIVATED,
    SYSTEM_INITIALIZED,
    TRANSACTION_APPROVED,
    TRANSACTION_CREATED,
    TRANSACTION_EXECUTED,
    WALLET_DEPOSITED,
    AuditTrail,
)

__all__ = [
    "AuditEvent",
    "AuditTrail",
    "EMERGENCY_ACTIVATED",
    "SYSTEM_INITIALIZED",
    "TRANSACTION_APPROVED",
    "TRANSACTION_CREATED",
    "TRANSACTION_EXECUTED",
    "WALLET_DEPOSITED",
]

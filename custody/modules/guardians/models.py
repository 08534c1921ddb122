"""Domain models for guardians."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Guardian:
    address: str
    role: str
    is_active: bool = True
    # Stored for reporting only; enforcement uses the system-wide limits.
    daily_limit: int = 0
    monthly_limit: int = 0
    approval_count: int = 0
    last_approval: int = 0


@dataclass(slots=True)
class GuardianStats:
    total: int
    active: int
    total_approvals: int
    average_approvals: float


@dataclass(slots=True)
class GuardianApproval:
    transaction_id: int
    guardian: str
    position: int
    approved_at: int

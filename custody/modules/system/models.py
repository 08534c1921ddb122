"""Domain models for system configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SystemLimits:
    daily_limit: int
    monthly_limit: int
    high_value_threshold: int
    required_approvals: int = 2
    hot_wallet_percentage: int = 5
    cold_wallet_percentage: int = 95


@dataclass(slots=True)
class SystemConfig:
    limits: SystemLimits
    hot_wallet: str
    cold_wallet: str
    guardian_count: int
    transaction_counter: int
    initialized_at: int

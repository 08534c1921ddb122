"""Spending limit exports."""

from .models import (
    DAYS_PER_MONTH,
    SECONDS_PER_DAY,
    SpendingPeriod,
    SpendingSummary,
    day_bucket,
    month_bucket,
)
from .service import SpendingLimitEnforcer

__all__ = [
    "DAYS_PER_MONTH",
    "SECONDS_PER_DAY",
    "SpendingLimitEnforcer",
    "SpendingPeriod",
    "SpendingSummary",
    "day_bucket",
    "month_bucket",
]

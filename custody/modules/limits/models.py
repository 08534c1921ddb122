"""Domain models for rolling spending limits."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SECONDS_PER_DAY = 86_400
# Months are approximated as 30-day blocks of the day counter, not calendar months.
DAYS_PER_MONTH = 30


class SpendingPeriod(str, Enum):
    DAY = "day"
    MONTH = "month"


def day_bucket(timestamp: int) -> int:
    return timestamp // SECONDS_PER_DAY


def month_bucket(timestamp: int) -> int:
    return day_bucket(timestamp) // DAYS_PER_MONTH


@dataclass(slots=True)
class SpendingSummary:
    day: int
    month: int
    daily_spent: int
    monthly_spent: int
    daily_limit: int
    monthly_limit: int

    @property
    def daily_remaining(self) -> int:
        return max(self.daily_limit - self.daily_spent, 0)

    @property
    def monthly_remaining(self) -> int:
        return max(self.monthly_limit - self.monthly_spent, 0)

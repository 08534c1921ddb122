"""Ledger clock used for bucketing spend and stamping records."""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    def now(self) -> int:
        """Return the current timestamp in whole seconds."""
        ...


class SystemClock:
    """Wall-clock time truncated to seconds."""

    def now(self) -> int:
        return int(time.time())


__all__ = ["Clock", "SystemClock"]

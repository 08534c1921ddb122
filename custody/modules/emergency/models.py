"""Domain models for the emergency circuit breaker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class EmergencyState:
    is_active: bool
    initiator: Optional[str] = None
    activated_at: Optional[int] = None

"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WalletKind(str, Enum):
    HOT = "hot"
    COLD = "cold"


@dataclass(slots=True)
class Wallet:
    address: str
    kind: WalletKind
    balance: int
    reserved_balance: int
    is_active: bool

    @property
    def available(self) -> int:
        return self.balance - self.reserved_balance

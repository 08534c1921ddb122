"""Result types returned by the custody engine."""

from __future__ import annotations

from dataclasses import dataclass

from custody.modules.transactions import Transaction


@dataclass(slots=True)
class ApprovalOutcome:
    transaction: Transaction
    quorum_reached: bool

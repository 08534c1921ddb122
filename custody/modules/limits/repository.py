"""Repository protocol for spending buckets."""

from __future__ import annotations

from typing import Protocol


class SpendingRepository(Protocol):
    async def get_spent(self, period: str, bucket: int) -> int:
        ...

    async def add_spent(self, period: str, bucket: int, amount: int) -> int:
        ...

"""Repository protocol for emergency state."""

from __future__ import annotations

from typing import Protocol

from custody.infrastructure.database.models import EmergencyState as EmergencyStateModel


class EmergencyRepository(Protocol):
    async def get_state(self) -> EmergencyStateModel | None:
        ...

    async def create_state(self) -> EmergencyStateModel:
        ...

    async def activate(self, initiator: str, timestamp: int) -> EmergencyStateModel:
        ...

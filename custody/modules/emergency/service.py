"""Emergency controller: a one-way global halt for transaction flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import EmergencyState as EmergencyStateModel
from custody.infrastructure.database.repositories.emergency_repository import SqlEmergencyRepository
from custody.modules.common.exceptions import EmergencyActiveError

from .models import EmergencyState
from .repository import EmergencyRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EmergencyController:
    repository: EmergencyRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "EmergencyController":
        return cls(SqlEmergencyRepository(session))

    async def arm(self) -> EmergencyState:
        model = await self.repository.get_state()
        if model is None:
            model = await self.repository.create_state()
        return self._to_domain(model)

    async def state(self) -> EmergencyState:
        model = await self.repository.get_state()
        if model is None:
            return EmergencyState(is_active=False)
        return self._to_domain(model)

    async def is_tripped(self) -> bool:
        return (await self.state()).is_active

    async def ensure_not_tripped(self) -> None:
        if await self.is_tripped():
            raise EmergencyActiveError("Emergency mode active")

    async def trip(self, guardian: str, timestamp: int) -> tuple[EmergencyState, bool]:
        """Raise the emergency flag; returns the state and whether this call raised it."""
        current = await self.state()
        if current.is_active:
            # Later shutdowns never overwrite the first initiator or timestamp.
            logger.info(
                "Emergency mode already active (raised by %s), ignoring shutdown from %s",
                current.initiator,
                guardian,
            )
            return current, False
        model = await self.repository.activate(guardian, timestamp)
        return self._to_domain(model), True

    @staticmethod
    def _to_domain(model: EmergencyStateModel) -> EmergencyState:
        return EmergencyState(
            is_active=bool(model.is_active),
            initiator=model.initiator,
            activated_at=int(model.activated_at) if model.activated_at is not None else None,
        )

"""SQLAlchemy implementation for emergency state."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import SINGLETON_ID, EmergencyState


class SqlEmergencyRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_state(self) -> EmergencyState | None:
        return await self._session.get(EmergencyState, SINGLETON_ID)

    async def create_state(self) -> EmergencyState:
        model = EmergencyState(id=SINGLETON_ID, is_active=False)
        self._session.add(model)
        await self._session.flush()
        return model

    async def activate(self, initiator: str, timestamp: int) -> EmergencyState:
        model = await self.get_state()
        if model is None:
            model = await self.create_state()
        model.is_active = True
        model.initiator = initiator
        model.activated_at = timestamp
        await self._session.flush()
        return model

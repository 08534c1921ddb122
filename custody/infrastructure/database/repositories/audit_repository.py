"""SQLAlchemy repository for audit events."""

from __future__ import annotations

import json

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.models import AuditEvent as AuditEventModel


class SqlAuditRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add_event(
        self,
        *,
        action: str,
        actor: str | None,
        resource: str,
        data: dict | None,
        created_at: int,
    ) -> AuditEventModel:
        model = AuditEventModel(
            action=action,
            actor=actor,
            resource=resource,
            data=json.dumps(data, ensure_ascii=False) if data else None,
            created_at=created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return model

    async def list_events(self, limit: int, offset: int, action: str | None) -> list[AuditEventModel]:
        stmt = select(AuditEventModel)
        if action:
            stmt = stmt.where(AuditEventModel.action == action)
        stmt = stmt.order_by(desc(AuditEventModel.id)).offset(offset).limit(limit)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

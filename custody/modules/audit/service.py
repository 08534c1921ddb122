"""Audit trail for custody actions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from custody.infrastructure.database.repositories.audit_repository import SqlAuditRepository

from .models import AuditEvent
from .repository import AuditRepository

logger = logging.getLogger(__name__)

SYSTEM_INITIALIZED = "system.initialized"
WALLET_DEPOSITED = "wallet.deposited"
TRANSACTION_CREATED = "transaction.created"
TRANSACTION_APPROVED = "transaction.approved"
TRANSACTION_EXECUTED = "transaction.executed"
EMERGENCY_ACTIVATED = "emergency.activated"


@dataclass(slots=True)
class AuditTrail:
    repository: AuditRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "AuditTrail":
        return cls(SqlAuditRepository(session))

    async def record(
        self,
        action: str,
        *,
        resource: str,
        timestamp: int,
        actor: Optional[str] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> AuditEvent:
        model = await self.repository.add_event(
            action=action,
            actor=actor,
            resource=resource,
            data=data,
            created_at=timestamp,
        )
        logger.info("AUDIT %s on %s by %s", action, resource, actor or "system")
        return AuditEvent.from_orm(model)

    async def list_events(self, limit: int = 50, offset: int = 0, action: str | None = None) -> list[AuditEvent]:
        rows = await self.repository.list_events(limit, offset, action)
        return [AuditEvent.from_orm(row) for row in rows]

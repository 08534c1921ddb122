"""Repository protocol for persisting audit events."""

from __future__ import annotations

from typing import Protocol, Sequence

from custody.infrastructure.database.models import AuditEvent as AuditEventModel


class AuditRepository(Protocol):
    async def add_event(
        self,
        *,
        action: str,
        actor: str | None,
        resource: str,
        data: dict | None,
        created_at: int,
    ) -> AuditEventModel:
        ...

    async def list_events(self, limit: int, offset: int, action: str | None) -> Sequence[AuditEventModel]:
        ...

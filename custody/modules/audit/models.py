"""Audit event domain model."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional

from custody.infrastructure.database import models as orm


@dataclass(slots=True)
class AuditEvent:
    id: int
    action: str
    actor: Optional[str]
    resource: str
    data: Optional[dict[str, Any]]
    created_at: int

    @classmethod
    def from_orm(cls, instance: orm.AuditEvent) -> "AuditEvent":
        payload = None
        if instance.data:
            try:
                payload = json.loads(instance.data)
            except json.JSONDecodeError:
                payload = None
        return cls(
            id=int(instance.id),
            action=instance.action,
            actor=instance.actor,
            resource=instance.resource,
            data=payload,
            created_at=int(instance.created_at),
        )

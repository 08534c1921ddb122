"""Audit trail endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends

from custody.interfaces.http.deps import get_custody_engine
from custody.modules.engine import CustodyEngine
from custody.schemas import AuditEventListResponse, AuditEventResponse

router = APIRouter()


@router.get("/events", response_model=AuditEventListResponse, summary="Audit events, newest first")
async def list_audit_events(
    action: Optional[str] = None,
    limit: int = 50,
    offset: int = 0,
    engine: CustodyEngine = Depends(get_custody_engine),
) -> AuditEventListResponse:
    events = await engine.list_audit_events(limit, offset, action)
    return AuditEventListResponse(events=[AuditEventResponse.model_validate(event) for event in events])

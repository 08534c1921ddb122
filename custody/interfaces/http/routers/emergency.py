"""Emergency circuit breaker endpoints."""
from fastapi import APIRouter, Depends

from custody.interfaces.http.deps import get_current_caller, get_custody_engine
from custody.modules.common.auth import CallerIdentity
from custody.modules.engine import CustodyEngine
from custody.schemas import EmergencyShutdownRequest, EmergencyStateResponse

router = APIRouter()


@router.get("", response_model=EmergencyStateResponse, summary="Emergency mode state")
async def emergency_state(engine: CustodyEngine = Depends(get_custody_engine)) -> EmergencyStateResponse:
    return EmergencyStateResponse.model_validate(await engine.emergency_state())


@router.post("/shutdown", response_model=EmergencyStateResponse, summary="Halt all transaction flow")
async def emergency_shutdown(
    payload: EmergencyShutdownRequest,
    caller: CallerIdentity = Depends(get_current_caller),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> EmergencyStateResponse:
    state = await engine.emergency_shutdown(guardian=payload.guardian or caller.address, caller=caller)
    return EmergencyStateResponse.model_validate(state)

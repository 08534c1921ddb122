"""System endpoints: initialization, limits and overall status."""
from fastapi import APIRouter, Depends, status

from custody.interfaces.http.deps import get_custody_engine
from custody.modules.engine import CustodyEngine
from custody.modules.guardians import Guardian
from custody.modules.system import SystemLimits
from custody.schemas import (
    InitializeRequest,
    SpendingSummaryResponse,
    SystemConfigResponse,
    SystemLimitsSchema,
    SystemStatusResponse,
)

router = APIRouter()


@router.post(
    "/initialize",
    response_model=SystemConfigResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Initialize guardians, wallets and limits",
    description=(
        "Records the configuration only. Guardian bearer tokens are not returned here; "
        "issue them with the `init_custody.py` operator script, which prints one token per guardian."
    ),
)
async def initialize(
    payload: InitializeRequest,
    engine: CustodyEngine = Depends(get_custody_engine),
) -> SystemConfigResponse:
    config = await engine.initialize(
        guardians=[
            Guardian(
                address=guardian.address,
                role=guardian.role,
                is_active=guardian.is_active,
                daily_limit=guardian.daily_limit,
                monthly_limit=guardian.monthly_limit,
            )
            for guardian in payload.guardians
        ],
        hot_wallet=payload.hot_wallet,
        cold_wallet=payload.cold_wallet,
        limits=SystemLimits(**payload.limits.model_dump()),
    )
    return SystemConfigResponse.model_validate(config)


@router.get("/status", response_model=SystemStatusResponse, summary="Initialization, emergency and balance overview")
async def system_status(engine: CustodyEngine = Depends(get_custody_engine)) -> SystemStatusResponse:
    initialized = await engine.is_initialized()
    return SystemStatusResponse(
        initialized=initialized,
        emergency_mode=await engine.is_emergency_mode(),
        transaction_counter=await engine.get_transaction_counter(),
        hot_balance=await engine.get_hot_balance() if initialized else None,
        cold_balance=await engine.get_cold_balance() if initialized else None,
    )


@router.get("/config", response_model=SystemConfigResponse, summary="Full system configuration")
async def system_config(engine: CustodyEngine = Depends(get_custody_engine)) -> SystemConfigResponse:
    return SystemConfigResponse.model_validate(await engine.get_system_config())


@router.get("/limits", response_model=SystemLimitsSchema, summary="Configured system limits")
async def system_limits(engine: CustodyEngine = Depends(get_custody_engine)) -> SystemLimitsSchema:
    return SystemLimitsSchema.model_validate(await engine.get_system_limits())


@router.get("/spending", response_model=SpendingSummaryResponse, summary="Spend in the current day and month buckets")
async def spending_summary(engine: CustodyEngine = Depends(get_custody_engine)) -> SpendingSummaryResponse:
    return SpendingSummaryResponse.model_validate(await engine.spending_summary())

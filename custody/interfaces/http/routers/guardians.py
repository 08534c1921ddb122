"""Guardian registry endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Path, status

from custody.interfaces.http.deps import get_current_caller, get_custody_engine
from custody.modules.common.auth import CallerIdentity
from custody.modules.engine import CustodyEngine
from custody.schemas import (
    GuardianApprovalListResponse,
    GuardianApprovalResponse,
    GuardianListResponse,
    GuardianResponse,
    GuardianStatsResponse,
    TransactionListResponse,
    TransactionResponse,
)

router = APIRouter()


@router.get("", response_model=GuardianListResponse, summary="List guardians")
async def list_guardians(engine: CustodyEngine = Depends(get_custody_engine)) -> GuardianListResponse:
    guardians = await engine.list_guardians()
    return GuardianListResponse(
        total=len(guardians),
        guardians=[GuardianResponse.model_validate(guardian) for guardian in guardians],
    )


@router.get("/stats", response_model=GuardianStatsResponse, summary="Guardian approval statistics")
async def guardian_stats(engine: CustodyEngine = Depends(get_custody_engine)) -> GuardianStatsResponse:
    return GuardianStatsResponse.model_validate(await engine.guardian_stats())


@router.get(
    "/me/pending",
    response_model=TransactionListResponse,
    summary="Transactions still waiting for the authenticated guardian",
)
async def my_pending_approvals(
    caller: CallerIdentity = Depends(get_current_caller),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> TransactionListResponse:
    if await engine.get_guardian(caller.address) is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not a guardian")
    transactions = await engine.pending_approvals(caller.address)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(tx) for tx in transactions]
    )


@router.get("/{address}", response_model=GuardianResponse, summary="Guardian details")
async def get_guardian(
    address: str = Path(..., description="Guardian address"),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> GuardianResponse:
    guardian = await engine.get_guardian(address)
    if guardian is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guardian not found")
    return GuardianResponse.model_validate(guardian)


@router.get(
    "/{address}/approvals",
    response_model=GuardianApprovalListResponse,
    summary="Approval history of a guardian",
)
async def guardian_approvals(
    address: str = Path(..., description="Guardian address"),
    limit: int = 20,
    offset: int = 0,
    engine: CustodyEngine = Depends(get_custody_engine),
) -> GuardianApprovalListResponse:
    if await engine.get_guardian(address) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guardian not found")
    approvals = await engine.guardian_approvals(address, limit, offset)
    return GuardianApprovalListResponse(
        approvals=[GuardianApprovalResponse.model_validate(approval) for approval in approvals]
    )

"""Transaction creation, approval and lookup endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, status

from custody.interfaces.http.deps import get_current_caller, get_custody_engine
from custody.modules.common.auth import CallerIdentity
from custody.modules.engine import CustodyEngine
from custody.modules.transactions import TransactionStatus
from custody.schemas import (
    ApprovalRequest,
    ApprovalResponse,
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatsResponse,
)

router = APIRouter()


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request a transfer",
)
async def create_transaction(
    payload: TransactionCreateRequest,
    engine: CustodyEngine = Depends(get_custody_engine),
) -> TransactionResponse:
    transaction = await engine.create_transaction(
        from_wallet=payload.from_wallet,
        to_address=payload.to_address,
        amount=payload.amount,
        memo=payload.memo,
        tx_type=payload.tx_type,
    )
    return TransactionResponse.model_validate(transaction)


@router.get("", response_model=TransactionListResponse, summary="List transactions, newest first")
async def list_transactions(
    status_filter: Optional[TransactionStatus] = None,
    limit: int = 50,
    offset: int = 0,
    engine: CustodyEngine = Depends(get_custody_engine),
) -> TransactionListResponse:
    transactions = await engine.list_transactions(status_filter, limit, offset)
    return TransactionListResponse(
        transactions=[TransactionResponse.model_validate(tx) for tx in transactions]
    )


@router.get("/stats", response_model=TransactionStatsResponse, summary="Transaction counts and executed volume")
async def transaction_stats(engine: CustodyEngine = Depends(get_custody_engine)) -> TransactionStatsResponse:
    return TransactionStatsResponse.model_validate(await engine.transaction_stats())


@router.get("/{tx_id}", response_model=TransactionResponse, summary="Transaction details")
async def get_transaction(
    tx_id: int = Path(..., description="Transaction id"),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> TransactionResponse:
    transaction = await engine.get_transaction(tx_id)
    if transaction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return TransactionResponse.model_validate(transaction)


@router.post(
    "/{tx_id}/approvals",
    response_model=ApprovalResponse,
    summary="Approve a transaction as a guardian",
)
async def approve_transaction(
    payload: ApprovalRequest,
    tx_id: int = Path(..., description="Transaction id"),
    caller: CallerIdentity = Depends(get_current_caller),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> ApprovalResponse:
    outcome = await engine.approve_transaction(
        guardian=payload.guardian or caller.address,
        tx_id=tx_id,
        caller=caller,
    )
    return ApprovalResponse.model_validate(outcome)

"""Wallet ledger endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Path, status

from custody.interfaces.http.deps import get_current_caller, get_custody_engine
from custody.modules.common.auth import CallerIdentity
from custody.modules.engine import CustodyEngine
from custody.schemas import DepositRequest, WalletListResponse, WalletResponse

router = APIRouter()


@router.get("", response_model=WalletListResponse, summary="List the hot and cold wallets")
async def list_wallets(engine: CustodyEngine = Depends(get_custody_engine)) -> WalletListResponse:
    wallets = await engine.list_wallets()
    return WalletListResponse(wallets=[WalletResponse.model_validate(wallet) for wallet in wallets])


@router.get("/hot", response_model=WalletResponse, summary="Hot wallet")
async def hot_wallet(engine: CustodyEngine = Depends(get_custody_engine)) -> WalletResponse:
    config = await engine.get_system_config()
    return await _wallet_or_404(engine, config.hot_wallet)


@router.get("/cold", response_model=WalletResponse, summary="Cold wallet")
async def cold_wallet(engine: CustodyEngine = Depends(get_custody_engine)) -> WalletResponse:
    config = await engine.get_system_config()
    return await _wallet_or_404(engine, config.cold_wallet)


@router.get("/{address}", response_model=WalletResponse, summary="Wallet balance and reservations")
async def get_wallet(
    address: str = Path(..., description="Wallet address"),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> WalletResponse:
    return await _wallet_or_404(engine, address)


@router.post(
    "/{address}/deposits",
    response_model=WalletResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Credit funds to a wallet",
)
async def deposit(
    payload: DepositRequest,
    address: str = Path(..., description="Wallet address"),
    caller: CallerIdentity = Depends(get_current_caller),
    engine: CustodyEngine = Depends(get_custody_engine),
) -> WalletResponse:
    wallet = await engine.deposit(
        wallet=address,
        amount=payload.amount,
        guardian=payload.guardian or caller.address,
        caller=caller,
    )
    return WalletResponse.model_validate(wallet)


async def _wallet_or_404(engine: CustodyEngine, address: str) -> WalletResponse:
    wallet = await engine.get_wallet(address)
    if wallet is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wallet not found")
    return WalletResponse.model_validate(wallet)

"""Pydantic schemas used by the HTTP interface."""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from custody.infrastructure.database.models import MAX_AMOUNT
from custody.modules.transactions import TransactionStatus, TransactionType
from custody.modules.wallets import WalletKind


class TokenData(BaseModel):
    address: str
    role: Optional[str] = None


class GuardianInput(BaseModel):
    address: str = Field(..., min_length=1, max_length=128)
    role: str = Field(..., min_length=1, max_length=32)
    is_active: bool = True
    daily_limit: int = Field(default=0, ge=0, le=MAX_AMOUNT)
    monthly_limit: int = Field(default=0, ge=0, le=MAX_AMOUNT)


class SystemLimitsSchema(BaseModel):
    daily_limit: int = Field(..., le=MAX_AMOUNT)
    monthly_limit: int = Field(..., le=MAX_AMOUNT)
    high_value_threshold: int = Field(..., le=MAX_AMOUNT)
    required_approvals: int = 2
    hot_wallet_percentage: int = 5
    cold_wallet_percentage: int = 95

    model_config = ConfigDict(from_attributes=True)


class InitializeRequest(BaseModel):
    guardians: list[GuardianInput]
    hot_wallet: str = Field(..., min_length=1, max_length=128)
    cold_wallet: str = Field(..., min_length=1, max_length=128)
    limits: SystemLimitsSchema


class SystemConfigResponse(BaseModel):
    hot_wallet: str
    cold_wallet: str
    guardian_count: int
    transaction_counter: int
    initialized_at: int
    limits: SystemLimitsSchema

    model_config = ConfigDict(from_attributes=True)


class SystemStatusResponse(BaseModel):
    initialized: bool
    emergency_mode: bool
    transaction_counter: int
    hot_balance: Optional[int] = None
    cold_balance: Optional[int] = None


class SpendingSummaryResponse(BaseModel):
    day: int
    month: int
    daily_spent: int
    monthly_spent: int
    daily_limit: int
    monthly_limit: int
    daily_remaining: int
    monthly_remaining: int

    model_config = ConfigDict(from_attributes=True)


class GuardianResponse(BaseModel):
    address: str
    role: str
    is_active: bool
    daily_limit: int
    monthly_limit: int
    approval_count: int
    last_approval: int

    model_config = ConfigDict(from_attributes=True)


class GuardianListResponse(BaseModel):
    total: int
    guardians: list[GuardianResponse]


class GuardianStatsResponse(BaseModel):
    total: int
    active: int
    total_approvals: int
    average_approvals: float

    model_config = ConfigDict(from_attributes=True)


class GuardianApprovalResponse(BaseModel):
    transaction_id: int
    guardian: str
    position: int
    approved_at: int

    model_config = ConfigDict(from_attributes=True)


class GuardianApprovalListResponse(BaseModel):
    approvals: list[GuardianApprovalResponse]


class WalletResponse(BaseModel):
    address: str
    kind: WalletKind
    balance: int
    reserved_balance: int
    available: int
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class WalletListResponse(BaseModel):
    wallets: list[WalletResponse]


class DepositRequest(BaseModel):
    amount: int = Field(..., le=MAX_AMOUNT)
    guardian: Optional[str] = Field(default=None, description="Defaults to the authenticated guardian")


class TransactionCreateRequest(BaseModel):
    from_wallet: str = Field(..., min_length=1, max_length=128)
    to_address: str = Field(..., min_length=1, max_length=128)
    amount: int = Field(..., le=MAX_AMOUNT)
    memo: str = Field(default="", max_length=32)
    tx_type: TransactionType = TransactionType.PAYMENT


class TransactionResponse(BaseModel):
    id: int
    from_wallet: str
    to_address: str
    amount: int
    memo: str
    tx_type: TransactionType
    status: TransactionStatus
    approvals: list[str]
    created_at: int
    executed_at: Optional[int] = None
    requires_approval: bool

    model_config = ConfigDict(from_attributes=True)


class TransactionListResponse(BaseModel):
    transactions: list[TransactionResponse]


class TransactionStatsResponse(BaseModel):
    total: int
    awaiting_approval: int
    executed: int
    by_status: dict[str, int]
    executed_volume: int

    model_config = ConfigDict(from_attributes=True)


class ApprovalRequest(BaseModel):
    guardian: Optional[str] = Field(default=None, description="Defaults to the authenticated guardian")


class ApprovalResponse(BaseModel):
    quorum_reached: bool
    transaction: TransactionResponse

    model_config = ConfigDict(from_attributes=True)


class EmergencyShutdownRequest(BaseModel):
    guardian: Optional[str] = Field(default=None, description="Defaults to the authenticated guardian")


class EmergencyStateResponse(BaseModel):
    is_active: bool
    initiator: Optional[str] = None
    activated_at: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class AuditEventResponse(BaseModel):
    id: int
    action: str
    actor: Optional[str] = None
    resource: str
    data: Optional[dict[str, Any]] = None
    created_at: int

    model_config = ConfigDict(from_attributes=True)


class AuditEventListResponse(BaseModel):
    events: list[AuditEventResponse]

"""Mapping of custody domain errors onto HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from custody.modules.common.exceptions import (
    AlreadyInitializedError,
    CustodyError,
    DuplicateApprovalError,
    EmergencyActiveError,
    GuardianInactiveError,
    InsufficientFundsError,
    InvalidAmountError,
    InvalidConfigurationError,
    InvalidTransactionStateError,
    LimitExceededError,
    NotAGuardianError,
    NotInitializedError,
    TransactionNotFoundError,
    UnauthorizedError,
    WalletNotFoundError,
)

STATUS_BY_ERROR: dict[type[CustodyError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    NotAGuardianError: status.HTTP_403_FORBIDDEN,
    GuardianInactiveError: status.HTTP_403_FORBIDDEN,
    WalletNotFoundError: status.HTTP_404_NOT_FOUND,
    TransactionNotFoundError: status.HTTP_404_NOT_FOUND,
    AlreadyInitializedError: status.HTTP_409_CONFLICT,
    NotInitializedError: status.HTTP_409_CONFLICT,
    InsufficientFundsError: status.HTTP_409_CONFLICT,
    LimitExceededError: status.HTTP_409_CONFLICT,
    DuplicateApprovalError: status.HTTP_409_CONFLICT,
    InvalidTransactionStateError: status.HTTP_409_CONFLICT,
    InvalidConfigurationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    InvalidAmountError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    EmergencyActiveError: status.HTTP_423_LOCKED,
}


def status_for(exc: CustodyError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in STATUS_BY_ERROR:
            return STATUS_BY_ERROR[error_type]
    return status.HTTP_400_BAD_REQUEST


async def custody_error_handler(request: Request, exc: CustodyError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=status_for(exc),
        content={"detail": str(exc), "code": exc.code},
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustodyError, custody_error_handler)


__all__ = ["STATUS_BY_ERROR", "register_exception_handlers", "status_for"]

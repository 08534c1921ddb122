"""Wallet ledger exports."""

from .models import Wallet, WalletKind
from .service import WalletLedger, ensure_positive

__all__ = ["Wallet", "WalletKind", "WalletLedger", "ensure_positive"]

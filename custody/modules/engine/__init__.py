"""Custody engine facade exports."""

from .models import ApprovalOutcome
from .service import CustodyContext, CustodyEngine

__all__ = ["ApprovalOutcome", "CustodyContext", "CustodyEngine"]

"""Guardian registry exports."""

from .models import Guardian, GuardianApproval, GuardianStats
from .service import GuardianRegistry, GuardianSet, validate_guardian_set

__all__ = [
    "Guardian",
    "GuardianApproval",
    "GuardianRegistry",
    "GuardianSet",
    "GuardianStats",
    "validate_guardian_set",
]

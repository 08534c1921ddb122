"""Emergency controller exports."""

from .models import EmergencyState
from .service import EmergencyController

__all__ = ["EmergencyController", "EmergencyState"]

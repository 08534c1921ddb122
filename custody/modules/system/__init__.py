"""System configuration exports."""

from .models import SystemConfig, SystemLimits
from .service import GUARDIAN_COUNT, SystemService, validate_limits

__all__ = ["GUARDIAN_COUNT", "SystemConfig", "SystemLimits", "SystemService", "validate_limits"]

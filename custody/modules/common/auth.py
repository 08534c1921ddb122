"""Caller authorization capability."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .exceptions import UnauthorizedError


class Authenticator(Protocol):
    def require_auth(self, address: str) -> None:
        """Abort with ``UnauthorizedError`` unless the caller controls ``address``."""
        ...


@dataclass(slots=True, frozen=True)
class CallerIdentity:
    """The address a caller has proven control of, if any."""

    address: Optional[str] = None

    def require_auth(self, address: str) -> None:
        if self.address is None or self.address != address:
            raise UnauthorizedError(f"Caller is not authorized for {address}")


__all__ = ["Authenticator", "CallerIdentity"]

"""Custody policy engine: guardian-gated transfers between hot and cold wallets."""

__version__ = "1.0.0"

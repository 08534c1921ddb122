"""Core configuration, clock and security helpers."""

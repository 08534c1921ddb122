"""Custody engine dependency provider."""

from fastapi import Request

from custody.modules.engine import CustodyEngine


def get_custody_engine(request: Request) -> CustodyEngine:
    return request.app.state.custody_engine


__all__ = ["get_custody_engine"]

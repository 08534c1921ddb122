from fastapi import APIRouter

from custody.interfaces.http.routers import audit, emergency, guardians, system, transactions, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(system.router, prefix="/system", tags=["system"])
    router.include_router(guardians.router, prefix="/guardians", tags=["guardians"])
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    router.include_router(transactions.router, prefix="/transactions", tags=["transactions"])
    router.include_router(emergency.router, prefix="/emergency", tags=["emergency"])
    router.include_router(audit.router, prefix="/audit", tags=["audit"])
    return router


__all__ = [
    "create_api_router",
]

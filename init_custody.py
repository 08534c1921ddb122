"""
Initialize the custody system from a bootstrap file and print guardian tokens.

The bootstrap file is the JSON body accepted by ``POST /api/system/initialize``.
"""
import argparse
import asyncio
import json
from pathlib import Path

from custody.core.security import create_access_token
from custody.infrastructure.database import get_session_factory, init_db
from custody.modules.common.exceptions import AlreadyInitializedError
from custody.modules.engine import CustodyEngine
from custody.modules.guardians import Guardian
from custody.modules.system import SystemLimits
from custody.schemas import InitializeRequest


async def initialize_custody(bootstrap: Path) -> None:
    payload = InitializeRequest.model_validate(json.loads(bootstrap.read_text(encoding="utf-8")))

    await init_db()
    engine = CustodyEngine(get_session_factory())

    try:
        config = await engine.initialize(
            guardians=[
                Guardian(
                    address=guardian.address,
                    role=guardian.role,
                    is_active=guardian.is_active,
                    daily_limit=guardian.daily_limit,
                    monthly_limit=guardian.monthly_limit,
                )
                for guardian in payload.guardians
            ],
            hot_wallet=payload.hot_wallet,
            cold_wallet=payload.cold_wallet,
            limits=SystemLimits(**payload.limits.model_dump()),
        )
    except AlreadyInitializedError:
        print("Custody system already initialized, nothing to do")
        return

    print("=" * 50)
    print("Custody system initialized")
    print("=" * 50)
    print(f"Hot wallet:  {config.hot_wallet}")
    print(f"Cold wallet: {config.cold_wallet}")
    print(f"Quorum:      {config.limits.required_approvals} of {config.guardian_count}")
    print("=" * 50)
    for guardian in payload.guardians:
        token = create_access_token(guardian.address, role=guardian.role)
        print(f"{guardian.role} {guardian.address}")
        print(f"  token: {token}")
    print("=" * 50)
    print("Hand each token to its guardian over a secure channel")
    print("=" * 50)


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the custody policy engine")
    parser.add_argument("bootstrap", type=Path, help="JSON file with guardians, wallets and limits")
    args = parser.parse_args()
    asyncio.run(initialize_custody(args.bootstrap))


if __name__ == "__main__":
    main()

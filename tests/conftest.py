"""Shared fixtures: an in-memory database and an initialized custody engine."""

from dataclasses import dataclass

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from custody.infrastructure.database import build_session_factory, init_db
from custody.modules.common.auth import CallerIdentity
from custody.modules.engine import CustodyEngine
from custody.modules.guardians import Guardian
from custody.modules.system import SystemLimits

# Day bucket 19675, month bucket 655 (days 19650..19679).
NOW = 1_700_000_000
NEXT_DAY = 1_700_006_400
NEXT_MONTH = 1_700_352_000

G1 = "guardian-1"
G2 = "guardian-2"
G3 = "guardian-3"
STRANGER = "stranger"
HOT = "hot-wallet"
COLD = "cold-wallet"
RECIPIENT = "recipient-1"

HOT_FUNDING = 50_000
COLD_FUNDING = 150_000

LIMITS = SystemLimits(
    daily_limit=100_000,
    monthly_limit=1_000_000,
    high_value_threshold=1_000,
    required_approvals=2,
    hot_wallet_percentage=5,
    cold_wallet_percentage=95,
)


@dataclass
class FixedClock:
    current: int = NOW

    def now(self) -> int:
        return self.current

    def advance(self, seconds: int) -> None:
        self.current += seconds


def make_guardians(*, inactive: tuple[str, ...] = ()) -> list[Guardian]:
    return [
        Guardian(address=address, role=role, is_active=address not in inactive)
        for address, role in ((G1, "ceo"), (G2, "cfo"), (G3, "cto"))
    ]


def as_caller(address: str) -> CallerIdentity:
    return CallerIdentity(address=address)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest_asyncio.fixture
async def session_factory():
    db_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(db_engine)
    yield build_session_factory(db_engine)
    await db_engine.dispose()


@pytest.fixture
def engine(session_factory, clock) -> CustodyEngine:
    return CustodyEngine(session_factory, clock=clock)


@pytest_asyncio.fixture
async def custody(engine) -> CustodyEngine:
    """An initialized engine with both wallets funded."""
    await engine.initialize(guardians=make_guardians(), hot_wallet=HOT, cold_wallet=COLD, limits=LIMITS)
    await engine.deposit(wallet=HOT, amount=HOT_FUNDING, guardian=G1, caller=as_caller(G1))
    await engine.deposit(wallet=COLD, amount=COLD_FUNDING, guardian=G1, caller=as_caller(G1))
    return engine

"""Emergency shutdown halts every mutating operation."""

import pytest

from custody.modules import audit
from custody.modules.common.exceptions import (
    EmergencyActiveError,
    NotAGuardianError,
    NotInitializedError,
    UnauthorizedError,
)
from custody.modules.transactions import TransactionStatus
from tests.conftest import (
    COLD,
    G1,
    G2,
    HOT,
    HOT_FUNDING,
    NOW,
    RECIPIENT,
    STRANGER,
    as_caller,
)


class TestEmergencyShutdown:
    @pytest.mark.asyncio
    async def test_shutdown_activates_emergency_mode(self, custody):
        state = await custody.emergency_shutdown(guardian=G1, caller=as_caller(G1))

        assert state.is_active is True
        assert state.initiator == G1
        assert state.activated_at == NOW
        assert await custody.is_emergency_mode()

    @pytest.mark.asyncio
    async def test_mutations_are_blocked(self, custody):
        pending = await custody.create_transaction(from_wallet=COLD, to_address=RECIPIENT, amount=5_000)
        await custody.emergency_shutdown(guardian=G2, caller=as_caller(G2))

        with pytest.raises(EmergencyActiveError):
            await custody.create_transaction(from_wallet=HOT, to_address=RECIPIENT, amount=10)
        with pytest.raises(EmergencyActiveError):
            await custody.approve_transaction(guardian=G1, tx_id=pending.id, caller=as_caller(G1))
        with pytest.raises(EmergencyActiveError):
            await custody.deposit(wallet=HOT, amount=10, guardian=G1, caller=as_caller(G1))

        stored = await custody.get_transaction(pending.id)
        assert stored.status is TransactionStatus.AWAITING_APPROVAL
        assert stored.approvals == []

    @pytest.mark.asyncio
    async def test_queries_still_work(self, custody):
        await custody.create_transaction(from_wallet=HOT, to_address=RECIPIENT, amount=10)
        await custody.emergency_shutdown(guardian=G1, caller=as_caller(G1))

        assert await custody.get_hot_balance() == HOT_FUNDING - 10
        assert len(await custody.list_transactions()) == 1
        assert (await custody.get_system_config()).hot_wallet == HOT
        assert len(await custody.list_guardians()) == 3

    @pytest.mark.asyncio
    async def test_repeated_shutdown_keeps_first_initiator(self, custody, clock):
        await custody.emergency_shutdown(guardian=G1, caller=as_caller(G1))
        clock.advance(60)

        state = await custody.emergency_shutdown(guardian=G2, caller=as_caller(G2))

        assert state.initiator == G1
        assert state.activated_at == NOW
        events = await custody.list_audit_events(action=audit.EMERGENCY_ACTIVATED)
        assert len(events) == 1

    @pytest.mark.asyncio
    async def test_shutdown_requires_authenticated_guardian(self, custody):
        with pytest.raises(UnauthorizedError):
            await custody.emergency_shutdown(guardian=G1, caller=as_caller(G2))
        with pytest.raises(NotAGuardianError):
            await custody.emergency_shutdown(guardian=STRANGER, caller=as_caller(STRANGER))

        assert not await custody.is_emergency_mode()

    @pytest.mark.asyncio
    async def test_shutdown_requires_initialization(self, engine):
        with pytest.raises(NotInitializedError):
            await engine.emergency_shutdown(guardian=G1, caller=as_caller(G1))

        state = await engine.emergency_state()
        assert state.is_active is False
        assert state.initiator is None

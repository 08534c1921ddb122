"""HTTP interface over the custody engine."""

from datetime import timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from custody.core.security import create_access_token
from custody.main import create_app
from tests.conftest import COLD, COLD_FUNDING, G1, G2, G3, HOT, HOT_FUNDING, RECIPIENT, STRANGER

INITIALIZE_BODY = {
    "guardians": [
        {"address": G1, "role": "ceo"},
        {"address": G2, "role": "cfo"},
        {"address": G3, "role": "cto"},
    ],
    "hot_wallet": HOT,
    "cold_wallet": COLD,
    "limits": {
        "daily_limit": 100_000,
        "monthly_limit": 1_000_000,
        "high_value_threshold": 1_000,
        "required_approvals": 2,
        "hot_wallet_percentage": 5,
        "cold_wallet_percentage": 95,
    },
}


def auth(address: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(address)}"}


async def _client_for(engine):
    app = create_app(engine)
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def client(engine):
    async with await _client_for(engine) as http:
        yield http


@pytest_asyncio.fixture
async def funded_client(custody):
    async with await _client_for(custody) as http:
        yield http


class TestSystemEndpoints:
    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_initialize_then_status(self, client):
        response = await client.post("/api/system/initialize", json=INITIALIZE_BODY)
        assert response.status_code == 201
        body = response.json()
        assert body["hot_wallet"] == HOT
        assert body["limits"]["required_approvals"] == 2

        status_response = await client.get("/api/system/status")
        assert status_response.json() == {
            "initialized": True,
            "emergency_mode": False,
            "transaction_counter": 0,
            "hot_balance": 0,
            "cold_balance": 0,
        }

    @pytest.mark.asyncio
    async def test_status_before_initialize(self, client):
        response = await client.get("/api/system/status")

        assert response.status_code == 200
        assert response.json()["initialized"] is False
        assert response.json()["hot_balance"] is None

    @pytest.mark.asyncio
    async def test_second_initialize_conflicts(self, client):
        await client.post("/api/system/initialize", json=INITIALIZE_BODY)

        response = await client.post("/api/system/initialize", json=INITIALIZE_BODY)

        assert response.status_code == 409
        assert response.json()["code"] == "already_initialized"

    @pytest.mark.asyncio
    async def test_invalid_configuration(self, client):
        body = {**INITIALIZE_BODY, "guardians": INITIALIZE_BODY["guardians"][:2]}

        response = await client.post("/api/system/initialize", json=body)

        assert response.status_code == 422
        assert response.json()["code"] == "invalid_configuration"

    @pytest.mark.asyncio
    async def test_limit_beyond_64_bits_is_rejected(self, client):
        body = {**INITIALIZE_BODY, "limits": {**INITIALIZE_BODY["limits"], "daily_limit": 2**64}}

        response = await client.post("/api/system/initialize", json=body)

        assert response.status_code == 422
        assert (await client.get("/api/system/status")).json()["initialized"] is False

    @pytest.mark.asyncio
    async def test_limits_require_initialization(self, client):
        response = await client.get("/api/system/limits")

        assert response.status_code == 409
        assert response.json()["code"] == "not_initialized"

    @pytest.mark.asyncio
    async def test_limits_and_spending(self, funded_client):
        limits = await funded_client.get("/api/system/limits")
        assert limits.json()["daily_limit"] == 100_000

        await funded_client.post("/api/transactions", json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": 300})
        spending = await funded_client.get("/api/system/spending")
        assert spending.json()["daily_spent"] == 300
        assert spending.json()["daily_remaining"] == 100_000 - 300


class TestWalletEndpoints:
    @pytest.mark.asyncio
    async def test_wallet_views(self, funded_client):
        wallets = (await funded_client.get("/api/wallets")).json()["wallets"]
        assert [wallet["kind"] for wallet in wallets] == ["hot", "cold"]

        hot = (await funded_client.get("/api/wallets/hot")).json()
        assert hot["balance"] == HOT_FUNDING
        assert hot["available"] == HOT_FUNDING

        cold = (await funded_client.get(f"/api/wallets/{COLD}")).json()
        assert cold["balance"] == COLD_FUNDING

    @pytest.mark.asyncio
    async def test_unknown_wallet_is_404(self, funded_client):
        response = await funded_client.get("/api/wallets/nowhere")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_deposit_requires_token(self, funded_client):
        response = await funded_client.post(f"/api/wallets/{HOT}/deposits", json={"amount": 10})

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_deposit_with_guardian_token(self, funded_client):
        response = await funded_client.post(
            f"/api/wallets/{HOT}/deposits",
            json={"amount": 10},
            headers=auth(G2),
        )

        assert response.status_code == 201
        assert response.json()["balance"] == HOT_FUNDING + 10

    @pytest.mark.asyncio
    async def test_oversized_deposits_are_rejected(self, funded_client):
        too_large = await funded_client.post(f"/api/wallets/{HOT}/deposits", json={"amount": 2**63}, headers=auth(G1))
        assert too_large.status_code == 422

        overflow = await funded_client.post(
            f"/api/wallets/{HOT}/deposits",
            json={"amount": 2**63 - 10},
            headers=auth(G1),
        )
        assert overflow.status_code == 422
        assert overflow.json()["code"] == "invalid_amount"

        hot = (await funded_client.get(f"/api/wallets/{HOT}")).json()
        assert hot["balance"] == HOT_FUNDING

    @pytest.mark.asyncio
    async def test_deposit_by_stranger_is_forbidden(self, funded_client):
        response = await funded_client.post(
            f"/api/wallets/{HOT}/deposits",
            json={"amount": 10},
            headers=auth(STRANGER),
        )

        assert response.status_code == 403
        assert response.json()["code"] == "not_a_guardian"


class TestTransactionEndpoints:
    @pytest.mark.asyncio
    async def test_small_payment_executes(self, funded_client):
        response = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": 500, "memo": "rent"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["status"] == "executed"
        assert body["memo"] == "rent"

    @pytest.mark.asyncio
    async def test_approval_flow(self, funded_client):
        created = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": COLD, "to_address": RECIPIENT, "amount": 5_000, "tx_type": "withdrawal"},
        )
        tx_id = created.json()["id"]
        assert created.json()["status"] == "awaiting_approval"

        pending = await funded_client.get("/api/guardians/me/pending", headers=auth(G1))
        assert [tx["id"] for tx in pending.json()["transactions"]] == [tx_id]

        first = await funded_client.post(f"/api/transactions/{tx_id}/approvals", json={}, headers=auth(G1))
        assert first.status_code == 200
        assert first.json()["quorum_reached"] is False

        second = await funded_client.post(f"/api/transactions/{tx_id}/approvals", json={}, headers=auth(G2))
        assert second.json()["quorum_reached"] is True
        assert second.json()["transaction"]["status"] == "executed"
        assert second.json()["transaction"]["approvals"] == [G1, G2]

        stored = await funded_client.get(f"/api/transactions/{tx_id}")
        assert stored.json()["status"] == "executed"

    @pytest.mark.asyncio
    async def test_duplicate_approval_conflicts(self, funded_client):
        created = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": COLD, "to_address": RECIPIENT, "amount": 5_000},
        )
        tx_id = created.json()["id"]
        await funded_client.post(f"/api/transactions/{tx_id}/approvals", json={}, headers=auth(G1))

        response = await funded_client.post(f"/api/transactions/{tx_id}/approvals", json={}, headers=auth(G1))

        assert response.status_code == 409
        assert response.json()["code"] == "duplicate_approval"

    @pytest.mark.asyncio
    async def test_approving_for_another_guardian_is_unauthorized(self, funded_client):
        created = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": COLD, "to_address": RECIPIENT, "amount": 5_000},
        )

        response = await funded_client.post(
            f"/api/transactions/{created.json()['id']}/approvals",
            json={"guardian": G2},
            headers=auth(G1),
        )

        assert response.status_code == 401
        assert response.json()["code"] == "unauthorized"

    @pytest.mark.asyncio
    async def test_expired_token_is_rejected(self, funded_client):
        token = create_access_token(G1, expires_delta=timedelta(seconds=-1))

        response = await funded_client.post(
            "/api/transactions/1/approvals",
            json={},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_error_mapping(self, funded_client):
        missing = await funded_client.get("/api/transactions/999")
        assert missing.status_code == 404

        not_found = await funded_client.post("/api/transactions/999/approvals", json={}, headers=auth(G1))
        assert not_found.status_code == 404
        assert not_found.json()["code"] == "transaction_not_found"

        invalid = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": 0},
        )
        assert invalid.status_code == 422
        assert invalid.json()["code"] == "invalid_amount"

        too_much = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": HOT_FUNDING + 1},
        )
        assert too_much.status_code == 409
        assert too_much.json()["code"] == "insufficient_funds"

        over_limit = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": COLD, "to_address": RECIPIENT, "amount": 100_001},
        )
        assert over_limit.status_code == 409
        assert over_limit.json()["code"] == "limit_exceeded"

    @pytest.mark.asyncio
    async def test_list_and_stats(self, funded_client):
        await funded_client.post("/api/transactions", json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": 100})
        await funded_client.post("/api/transactions", json={"from_wallet": COLD, "to_address": RECIPIENT, "amount": 200})

        listed = await funded_client.get("/api/transactions", params={"status_filter": "awaiting_approval"})
        assert [tx["id"] for tx in listed.json()["transactions"]] == [2]

        stats = (await funded_client.get("/api/transactions/stats")).json()
        assert stats["total"] == 2
        assert stats["executed"] == 1
        assert stats["executed_volume"] == 100


class TestGuardianEndpoints:
    @pytest.mark.asyncio
    async def test_list_and_detail(self, funded_client):
        listed = (await funded_client.get("/api/guardians")).json()
        assert listed["total"] == 3
        assert [guardian["address"] for guardian in listed["guardians"]] == [G1, G2, G3]

        detail = await funded_client.get(f"/api/guardians/{G2}")
        assert detail.json()["role"] == "cfo"

        missing = await funded_client.get(f"/api/guardians/{STRANGER}")
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_approval_history_and_stats(self, funded_client):
        created = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": COLD, "to_address": RECIPIENT, "amount": 5_000},
        )
        tx_id = created.json()["id"]
        await funded_client.post(f"/api/transactions/{tx_id}/approvals", json={}, headers=auth(G3))

        history = (await funded_client.get(f"/api/guardians/{G3}/approvals")).json()
        assert [approval["transaction_id"] for approval in history["approvals"]] == [tx_id]

        stats = (await funded_client.get("/api/guardians/stats")).json()
        assert stats["total_approvals"] == 1

    @pytest.mark.asyncio
    async def test_pending_for_stranger_is_forbidden(self, funded_client):
        response = await funded_client.get("/api/guardians/me/pending", headers=auth(STRANGER))

        assert response.status_code == 403


class TestEmergencyEndpoints:
    @pytest.mark.asyncio
    async def test_shutdown_locks_mutations(self, funded_client):
        shutdown = await funded_client.post("/api/emergency/shutdown", json={}, headers=auth(G3))
        assert shutdown.status_code == 200
        assert shutdown.json()["initiator"] == G3

        state = (await funded_client.get("/api/emergency")).json()
        assert state["is_active"] is True

        blocked = await funded_client.post(
            "/api/transactions",
            json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": 10},
        )
        assert blocked.status_code == 423
        assert blocked.json()["code"] == "emergency_active"

        wallets = await funded_client.get("/api/wallets")
        assert wallets.status_code == 200

    @pytest.mark.asyncio
    async def test_shutdown_requires_token(self, funded_client):
        response = await funded_client.post("/api/emergency/shutdown", json={})

        assert response.status_code == 401


class TestAuditEndpoints:
    @pytest.mark.asyncio
    async def test_events_newest_first(self, funded_client):
        await funded_client.post("/api/transactions", json={"from_wallet": HOT, "to_address": RECIPIENT, "amount": 10})

        response = await funded_client.get("/api/audit/events", params={"limit": 2})

        actions = [event["action"] for event in response.json()["events"]]
        assert actions == ["transaction.executed", "transaction.created"]

    @pytest.mark.asyncio
    async def test_filter_by_action(self, funded_client):
        response = await funded_client.get("/api/audit/events", params={"action": "system.initialized"})

        events = response.json()["events"]
        assert len(events) == 1
        assert events[0]["resource"] == "system"

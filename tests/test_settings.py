"""Settings sections and guardian tokens."""

import pytest
from fastapi import HTTPException

from custody.core.config import Settings
from custody.core.security import create_access_token, decode_access_token
from custody.modules.common.auth import CallerIdentity
from custody.modules.common.exceptions import UnauthorizedError


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.database_url.startswith("sqlite+aiosqlite://")
        assert settings.algorithm == "HS256"
        assert settings.api_prefix == "/api"

    def test_nested_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "sqlite+aiosqlite:///./other.db")
        monkeypatch.setenv("SECURITY__ACCESS_TOKEN_EXPIRE_MINUTES", "5")
        monkeypatch.setenv("LOGGING__LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite+aiosqlite:///./other.db"
        assert settings.access_token_expire_minutes == 5
        assert settings.logging.level == "DEBUG"


class TestTokens:
    def test_token_round_trip_keeps_address_and_role(self):
        token = create_access_token("guardian-1", role="ceo")

        data = decode_access_token(token)

        assert data.address == "guardian-1"
        assert data.role == "ceo"

    def test_garbage_token_is_rejected(self):
        with pytest.raises(HTTPException) as excinfo:
            decode_access_token("not-a-token")

        assert excinfo.value.status_code == 401


class TestCallerIdentity:
    def test_matching_address_passes(self):
        CallerIdentity(address="guardian-1").require_auth("guardian-1")

    def test_other_address_or_anonymous_fails(self):
        with pytest.raises(UnauthorizedError):
            CallerIdentity(address="guardian-2").require_auth("guardian-1")
        with pytest.raises(UnauthorizedError):
            CallerIdentity().require_auth("guardian-1")

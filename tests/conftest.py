"""Pytest fixtures for Pushest tests."""

import pytest

from pushest.auth import Authenticator
from pushest.config import ClientInfo, PushestConfig
from pushest.types import ConnectionState


@pytest.fixture
def config(monkeypatch) -> PushestConfig:
    """Create a test configuration."""
    for name in ("PUSHEST_APP_KEY", "PUSHEST_APP_SECRET", "PUSHEST_CLUSTER", "PUSHEST_ENCRYPTED", "PUSHEST_CLIENT"):
        monkeypatch.delenv(name, raising=False)
    return PushestConfig(
        app_key="test-key",
        app_secret="test-secret-32-characters-long!",
        cluster="eu",
        encrypted=True,
        client=ClientInfo(client_name="pushest", client_version="1.2.3"),
    )


@pytest.fixture
def socket_id() -> str:
    """Sample socket ID for testing."""
    return "123456.7890123"


@pytest.fixture
def authenticator(config) -> Authenticator:
    """Authenticator built from the test configuration."""
    return Authenticator(config.app_key, config.app_secret.get_secret_value())


@pytest.fixture
def state() -> ConnectionState:
    """Connection state matching the known-good signing vector."""
    return ConnectionState(app_key="app1", app_secret="s3cr3t", socket_id="123.456")

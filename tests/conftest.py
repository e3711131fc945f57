"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from unifi_cloud.client.unifi import clear_shared_clients
from unifi_cloud.config.constants import ENV_API_KEY, ENV_BASE_URL, ENV_PROFILE
from unifi_cloud.config.manager import ConfigManager
from unifi_cloud.config.models import ClientProfile

API = "https://api.ui.com"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch):
    """Keep the developer's environment and shared clients out of tests."""
    for name in (ENV_API_KEY, ENV_BASE_URL, ENV_PROFILE):
        monkeypatch.delenv(name, raising=False)
    yield
    clear_shared_clients()


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def cli_manager(config_manager: ConfigManager):
    """Route every CLI command to the temp config file."""
    with patch(
        "unifi_cloud.commands._common.get_manager",
        return_value=config_manager,
    ):
        yield config_manager


@pytest.fixture
def sample_profile() -> ClientProfile:
    return ClientProfile(name="home", api_key="test-api-key-123")


@pytest.fixture
def mock_hosts() -> dict:
    """Sample /ea/hosts response."""
    return {
        "data": [
            {
                "id": "host-1",
                "hardwareId": "eae0f123-0000-5111-b111-f74a6ba90000",
                "type": "console",
                "ipAddress": "192.168.1.1",
                "isBlocked": False,
                "reportedState": {"name": "Dream Machine", "hostname": "udm"},
            },
            {
                "id": "host-2",
                "type": "network-server",
                "ipAddress": "10.0.0.2",
                "isBlocked": False,
                "reportedState": {"hostname": "selfhosted"},
            },
        ],
        "httpStatusCode": 200,
        "traceId": "a7dc15e0eb4527142d7823515b15f87d",
    }


@pytest.fixture
def mock_sites() -> dict:
    """Sample /ea/sites response."""
    return {
        "data": [
            {
                "siteId": "site-1",
                "hostId": "host-2",
                "meta": {"name": "default", "desc": "Main Office", "timezone": "Europe/Amsterdam"},
                "isOwner": True,
            },
        ],
        "httpStatusCode": 200,
        "traceId": "3a8ad9b3e61e4c2d",
    }


@pytest.fixture
def mock_devices() -> dict:
    """Sample /ea/devices response, grouped by host."""
    return {
        "data": [
            {
                "hostId": "host-2",
                "hostName": "lab",
                "devices": [
                    {
                        "id": "F4E2C6EDB8E9",
                        "mac": "F4E2C6EDB8E9",
                        "name": "Office AP",
                        "model": "U6 Pro",
                        "ip": "10.0.0.20",
                        "status": "online",
                        "version": "6.6.77",
                    },
                ],
                "updatedAt": "2024-06-01T10:00:00Z",
            },
        ],
        "httpStatusCode": 200,
        "traceId": "8c1f2d",
    }

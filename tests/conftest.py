"""Test configuration and fixtures."""

import os

# Keep every Settings() built during tests off the network
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH0__DOMAIN", "tenant.example.auth0.com")
os.environ.setdefault("AUTH0__AUDIENCE", "https://tenant.example.auth0.com/api/v2/")
os.environ.setdefault("AUTH0__CLIENT_ID", "app-client")
os.environ.setdefault("AUTH0__CLIENT_SECRET", "app-secret")
os.environ.setdefault("AUTH0__MACHINE_CLIENT_ID", "machine-client")
os.environ.setdefault("AUTH0__MACHINE_CLIENT_SECRET", "machine-secret")
os.environ.setdefault("AUTH0__DB_CONNECTION", "Username-Password-Authentication")
os.environ.setdefault("APP_URL", "http://testserver")

import logfire  # noqa: E402
import pytest  # noqa: E402

from auth0link.config import ClientConfig  # noqa: E402


@pytest.fixture
def client_config() -> ClientConfig:
    """Auth0 client configuration for a fake tenant."""
    return ClientConfig(
        domain="tenant.example.auth0.com",
        audience="https://tenant.example.auth0.com/api/v2/",
        machine_client_id="machine-client",
        machine_client_secret="machine-secret",
        client_id="app-client",
        client_secret="app-secret",
        connection="Username-Password-Authentication",
        app_url="http://testserver",
        timeout=5.0,
    )


@pytest.fixture(scope="session", autouse=True)
def quiet_logfire():
    """Configure Logfire locally so instrumentation never tries to export."""
    logfire.configure(send_to_logfire=False, console=False)

"""Unit tests for settings and client configuration."""

from auth0link.config import Settings


class TestSettings:
    def test_nested_env_vars_are_loaded(self, monkeypatch):
        monkeypatch.setenv("AUTH0__DOMAIN", "other.auth0.com")
        monkeypatch.setenv("AUTH0__TIMEOUT", "12.5")

        settings = Settings()

        assert settings.auth0.domain == "other.auth0.com"
        assert settings.auth0.timeout == 12.5
        assert settings.is_test

    def test_client_config_is_built_from_settings(self):
        config = Settings().client_config

        assert config.base_url == "https://tenant.example.auth0.com"
        assert config.connection == "Username-Password-Authentication"
        assert config.callback_url == "http://testserver/auth/callback"


class TestClientConfig:
    def test_urls(self, client_config):
        assert client_config.token_url == "https://tenant.example.auth0.com/oauth/token"
        assert client_config.userinfo_url == "https://tenant.example.auth0.com/userinfo"

    def test_management_url_joins_onto_audience(self, client_config):
        assert (
            client_config.management_url("users/auth0|1/roles")
            == "https://tenant.example.auth0.com/api/v2/users/auth0|1/roles"
        )
        assert (
            client_config.management_url("/users")
            == "https://tenant.example.auth0.com/api/v2/users"
        )

"""Tests for the typed AppConfig dataclass."""

import pytest

from discord_relay.config import CONFIG, AppConfig, _env_int
from discord_relay.errors import ConfigError


class TestAppConfig:
    def test_defaults(self):
        c = AppConfig()
        assert c.port == 3000
        assert c.command_prefix == "!"
        assert c.attachment_concurrency == 3
        assert c.webhook_url == ""
        assert c.forwarding_enabled is False

    def test_from_env_mirrors_config(self, monkeypatch):
        monkeypatch.setitem(CONFIG, "discord_token", "tok")
        monkeypatch.setitem(CONFIG, "n8n_webhook_url", "https://n8n/hook")
        monkeypatch.setitem(CONFIG, "webhook_url", "https://hooks/msg")
        monkeypatch.setitem(CONFIG, "command_prefix", "?")
        c = AppConfig.from_env()
        assert c.discord_token == "tok"
        assert c.n8n_webhook_url == "https://n8n/hook"
        assert c.command_prefix == "?"
        assert c.forwarding_enabled is True

    def test_validate_ok(self):
        AppConfig(discord_token="tok", n8n_webhook_url="https://n8n/hook").validate()

    def test_validate_missing_both(self):
        c = AppConfig()
        assert c.missing() == ["DISCORD_TOKEN", "N8N_WEBHOOK_URL"]
        with pytest.raises(ConfigError) as exc_info:
            c.validate()
        assert "DISCORD_TOKEN" in str(exc_info.value)
        assert "N8N_WEBHOOK_URL" in str(exc_info.value)

    def test_validate_missing_webhook(self):
        with pytest.raises(ConfigError):
            AppConfig(discord_token="tok").validate()


class TestEnvInt:
    def test_unset(self, monkeypatch):
        monkeypatch.delenv("RELAY_TEST_INT", raising=False)
        assert _env_int("RELAY_TEST_INT", 7) == 7

    def test_valid(self, monkeypatch):
        monkeypatch.setenv("RELAY_TEST_INT", "8080")
        assert _env_int("RELAY_TEST_INT", 7) == 8080

    def test_invalid_falls_back(self, monkeypatch):
        monkeypatch.setenv("RELAY_TEST_INT", "abc")
        assert _env_int("RELAY_TEST_INT", 7) == 7

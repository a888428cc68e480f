"""Tests for port protocol conformance.

Verifies that every adapter implements the interface the domain expects.
"""

from unittest.mock import MagicMock

from discord_relay.ports.outbound import ChatPort, FeedbackPort, WebhookPort, WebhookResult


class TestWebhookResult:
    def test_ok_range(self):
        assert WebhookResult(status=200).ok is True
        assert WebhookResult(status=204).ok is True
        assert WebhookResult(status=302).ok is False
        assert WebhookResult(status=500).ok is False

    def test_defaults(self):
        assert WebhookResult(status=200).body == ""


class TestPortConformance:
    def test_webhook_client(self):
        from discord_relay.adapters.http.webhook_client import WebhookClient
        assert isinstance(WebhookClient(timeout_seconds=1), WebhookPort)

    def test_feedback_adapter(self):
        from discord_relay.adapters.discord.adapter import DiscordFeedbackAdapter
        assert isinstance(DiscordFeedbackAdapter(MagicMock()), FeedbackPort)

    def test_chat_adapter(self):
        from discord_relay.adapters.discord.adapter import DiscordChatAdapter
        assert isinstance(DiscordChatAdapter(MagicMock()), ChatPort)

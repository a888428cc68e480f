"""Outbound HTTP adapters."""

from discord_relay.adapters.http.webhook_client import WebhookClient, envelope_to_form

__all__ = ["WebhookClient", "envelope_to_form"]

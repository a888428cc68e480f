"""Application wiring and startup."""

import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI

from discord_relay.adapters.discord.adapter import DiscordChatAdapter, RelayBot
from discord_relay.adapters.http.webhook_client import WebhookClient
from discord_relay.adapters.web.server import create_app
from discord_relay.config import AppConfig
from discord_relay.domain.relay import MessageRelay
from discord_relay.errors import ConfigError


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_relay(config: AppConfig, webhook: Optional[WebhookClient] = None) -> MessageRelay:
    return MessageRelay(
        webhook=webhook or WebhookClient(timeout_seconds=config.http_timeout_seconds),
        primary_url=config.n8n_webhook_url,
        secondary_url=config.webhook_url,
        prefix=config.command_prefix,
        attachment_concurrency=config.attachment_concurrency,
    )


def build_app(config: AppConfig) -> FastAPI:
    """Wire the relay, the Discord client, and the HTTP app around one connection."""
    bot = RelayBot(build_relay(config))
    return create_app(
        chat=DiscordChatAdapter(bot),
        bot=bot,
        token=config.discord_token,
    )


def main() -> None:
    config = AppConfig.from_env()
    try:
        config.validate()
    except ConfigError as e:
        _log(str(e))
        sys.exit(1)

    _log(f"Command prefix: {config.command_prefix!r}")
    _log(f"Secondary forwarding: {'enabled' if config.forwarding_enabled else 'disabled'}")
    app = build_app(config)
    _log(f"Server listening on port {config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")
